from inflection import underscore

from metamodel.exc import Error


class Model:
    """
    A declarative model definition.

    >>> class TeamModel(Model):
    >>>     prefix = 'crossfield_team'
    >>>     fields = (MetaField('bio', TEXTAREA, show_in_rest=True),
    >>>               'title')
    >>>
    >>> registry.register_model(TeamModel)
    >>> registry.get_field('team', 'bio')
    'crossfield_team_bio'
    """

    name = None
    """
    Unique model name (str). Derived from the class name when not set.
    """

    prefix = None
    """
    Storage key prefix (str). Defaults to the model name.
    """

    fields = None
    """
    A sequence of fields, field mappings or short keys.
    """

    @classmethod
    def get_name(cls):
        if cls.name is None:
            name = underscore(cls.__name__)
            return name.replace('model', '').strip('_')
        if not isinstance(cls.name, str):
            raise Error('"name" must be a string')
        return cls.name

    @classmethod
    def get_prefix(cls):
        if cls.prefix is None:
            return cls.get_name()
        if not isinstance(cls.prefix, str):
            raise Error('"prefix" must be a string')
        return cls.prefix
