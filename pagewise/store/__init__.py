""" Record stores: where the records come from """

from .base import RecordStoreBase
from .memory import ListRecordStore
from .sa import SARecordStore
from .cache import CountCachingStore
