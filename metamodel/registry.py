from metamodel.fields import MetaField
from metamodel.log import logger
from metamodel.util import v


class ModelRegistry:
    """
    Model Registry.

    Ordered model fields, keyed by model name.
    Example: {'team': (<MetaField(cf_team_bio)>, <MetaField(cf_team_email)>)}.

    A registry is created once at start-up and handed to whatever needs to
    resolve keys or expose fields. Registration is not synchronized.
    """

    def __init__(self):
        self._models = dict()
        self._keys = dict()

    def register(self, name, prefix, fields):
        """
        Register a model, replacing any model previously registered under ``name``.

        >>> registry = ModelRegistry()
        >>> registry.register('team', 'crossfield_team', [
        >>>     {'key': 'bio', 'type': 'textarea', 'show_in_rest': True},
        >>>     MetaField('email', EMAIL),
        >>>     'title'])

        :param str name: unique model name
        :param str prefix: prepended to each short key to form the storage key
        :param fields: a sequence of fields, field mappings or short keys
        """
        prefix = '' if prefix is None else prefix
        bound = [MetaField.create(field).bind(prefix) for field in v(fields)]
        self._models[name] = tuple(bound)
        self._keys[name] = {field.short_key: field.key for field in bound}
        logger.info('registered model: {} ({})'.format(
            name, ', '.join(field.key for field in bound)))

    def register_model(self, model):
        """
        Register a declarative model class.

        :param model: a :class:`metamodel.model.Model` subclass
        """
        self.register(model.get_name(), model.get_prefix(), model.fields or ())

    def get(self, name):
        """
        Fields of a model, in registration order, or None if not registered.
        """
        return self._models.get(name)

    def get_field(self, name, short_key):
        """
        Storage key of a model field, or None if the model or field is not registered.

        >>> registry.get_field('team', 'bio')
        'crossfield_team_bio'
        """
        keys = self._keys.get(name)
        if keys is not None:
            return keys.get('{}'.format(short_key))

    def __contains__(self, name):
        return name in self._models

    def __iter__(self):
        return iter(self._models)

    def __len__(self):
        return len(self._models)

    def __repr__(self):
        return '<ModelRegistry({})>'.format(', '.join(self._models))
