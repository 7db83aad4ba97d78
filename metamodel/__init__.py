from metamodel.expose import FieldAdapter, FieldExposer
from metamodel.fields import COLOR, EMAIL, NUMBER, OTHER, TEXT, TEXTAREA, FieldType, MetaField
from metamodel.model import Model
from metamodel.registry import ModelRegistry
from metamodel.rest import RestRegistrar
from metamodel.sanitize import get_sanitizer
from metamodel.store import POST, TERM, USER, MemoryStore, MetaStore, ObjectKind
from metamodel.util import resolve_key, strip_key_prefix

__version__ = '0.1.0.dev0'
