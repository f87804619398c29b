"""Data loading, lenient parsing, and in-memory query engine."""
from .loader import DatasetLoadError, load_dataset
from .store import DataStore
from .query import Page, QueryService, paginate
from .normalize import parse_or_default, parse_scalar_int
