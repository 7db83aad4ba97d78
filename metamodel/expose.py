from metamodel.fields import MetaField
from metamodel.log import logger
from metamodel.sanitize import get_sanitizer
from metamodel.store import POST
from metamodel.util import get_object_id, strip_key_prefix, v


class FieldAdapter:
    """
    Bridges a REST field to the metadata store for one model field.
    """

    def __init__(self, field, store, kind=POST, name=None):
        """
        :param MetaField field: a field bound to a model prefix
        :param MetaStore store: the metadata store
        :param ObjectKind|str kind: object kind the metadata belongs to
        :param str name: the REST field name, defaults to the storage key
        """
        self.field = field
        self.store = store
        self.kind = kind
        self.name = field.key if name is None else name

    def get(self, obj):
        """
        Read the field value for a prepared response (``id`` entry).
        """
        value = self.store.read_meta(self.kind, get_object_id(obj), self.field.key)
        if callable(self.field.get_cb):
            value = self.field.get_cb(value)
        return value

    def update(self, value, obj):
        """
        Sanitize and store a new field value for an object (``ID`` or ``id``).

        The value is written under the REST field name, which is the storage key
        unless a prefix was stripped from it.

        The field's ``update_cb``, when callable, is called with the field, the
        object id and the sanitized value in place of the store write.
        """
        object_id = get_object_id(obj)
        value = get_sanitizer(self.field)(value)
        if callable(self.field.update_cb):
            return self.field.update_cb(self.field, object_id, value)
        return self.store.write_meta(self.kind, object_id, self.name, value)

    def __repr__(self):
        return '<FieldAdapter({})>'.format(self.name)


class FieldExposer:
    """
    Exposes model fields through a REST field registrar.

    >>> exposer = FieldExposer(RestRegistrar(), MemoryStore(), registry)
    >>> exposer.expose('team', 'team', strip_prefix='crossfield_team')
    [<FieldAdapter(bio)>, <FieldAdapter(email)>, <FieldAdapter(wins)>, <FieldAdapter(color)>]
    """

    def __init__(self, registrar, store, registry=None):
        """
        :param RestRegistrar registrar: receives the exposed fields
        :param MetaStore store: the metadata store read and written by the adapters
        :param ModelRegistry registry: resolves model names (optional)
        """
        self.registrar = registrar
        self.store = store
        self.registry = registry

    def get_fields(self, model):
        if isinstance(model, str):
            fields = self.registry.get(model) if self.registry is not None else None
            if fields is None:
                logger.info('model not registered: {}'.format(model))
                return ()
            return fields
        return model

    @staticmethod
    def load_field(field):
        field = MetaField.create(field)
        return field if field.key is not None else field.bind()

    def expose(self, model, object_type, resource_name=None, strip_prefix=None, kind=POST):
        """
        Register a get/update adapter pair for each model field with ``show_in_rest`` set.

        :param model: a registered model name, or a sequence of fields or field mappings
            whose keys are used as storage keys unless already bound
        :param str object_type: the object type the fields belong to
        :param str resource_name: the REST resource, defaults to ``object_type``
        :param str strip_prefix: removed from the front of each key to form the REST field name,
            i.e. ``crossfield_team`` turns ``crossfield_team_bio`` into ``bio`` (optional)
        :param ObjectKind|str kind: the kind of metadata to read and write
        :return: the registered adapters
        """
        resource_name = object_type if resource_name is None else resource_name
        adapters = list()
        for field in v(self.get_fields(model)):
            field = self.load_field(field)
            if not field.show_in_rest:
                continue
            adapter = FieldAdapter(field, self.store, kind, strip_key_prefix(field.key, strip_prefix))
            self.registrar.register_field(resource_name, adapter.name,
                                          get_callback=adapter.get,
                                          update_callback=adapter.update,
                                          schema=None)
            logger.info('exposed field: {} as {}.{}'.format(field.key, resource_name, adapter.name))
            adapters.append(adapter)
        return adapters
