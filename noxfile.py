import nox.sessions

# Nox
nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = [
    'tests',
    'tests_sqlalchemy',
    'tests_fastapi',
]

# Versions
PYTHON_VERSIONS = ['3.9', '3.10', '3.11', '3.12']
SQLALCHEMY_VERSIONS = [
    # Selective: major releases
    # NOTE: keep versions with breaking changes. Skip versions with minor bugfix changes.
    '2.0.0', '2.0.10', '2.0.20', '2.0.30',
]
FASTAPI_VERSIONS = [
    '0.100.1', '0.103.2', '0.109.2', '0.110.3', '0.115.0',
]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.sessions.Session, *, overrides: dict[str, str] = {}):
    """ Run all tests """
    session.install('.[test]')

    if overrides:
        session.install(*(f'{name}=={version}' for name, version in overrides.items()))

    # Test
    args = []
    if not overrides:
        args.append('--cov=pagewise')

    session.run('pytest', 'tests/', *args)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize('sqlalchemy', SQLALCHEMY_VERSIONS)
def tests_sqlalchemy(session: nox.sessions.Session, sqlalchemy):
    """ Test against a specific SqlAlchemy version """
    tests(session, overrides={'sqlalchemy': sqlalchemy})


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize('fastapi', FASTAPI_VERSIONS)
def tests_fastapi(session: nox.sessions.Session, fastapi):
    """ Test against a specific FastAPI version """
    tests(session, overrides={'fastapi': fastapi})
