def camel_case(name: str) -> str:
    """ Convert a snake_case name to camelCase

    Example:
        camel_case('has_next_page') => 'hasNextPage'
    """
    first, *rest = name.split('_')
    return first + ''.join(word.capitalize() for word in rest)
