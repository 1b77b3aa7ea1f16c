from .paginator import Paginator, get_strategy_cls
