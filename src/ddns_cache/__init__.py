from .cache import CacheStore
from .errors import ConfigurationError, DDNSCacheError, ResolutionError
from .models import Alias, CacheRecord, DDNSContext, Provider, ResolveResult
from .providers import load_context, make_provider, register_provider
from .resolver import DohResolver, SystemResolver, get_resolver, reset_resolver_cache
from .seeding import SeedReport, Seeder, seed_all

__version__ = "0.1.0"
