from collections import OrderedDict, defaultdict

import marshmallow as ma

from metamodel.exc import APIError, NotFound
from metamodel.log import logger


def get_error_object(e):
    if isinstance(e, APIError):
        return dict(errors=[dict(
            title=str(e),
            status=e.status)])
    raise e


class RestField:
    """
    An additional field on a REST resource.
    """

    def __init__(self, name, get_callback=None, update_callback=None, schema=None):
        """
        :param str name: field name in the response and update request
        :param get_callback: called with the prepared response, returns the field value (optional)
        :param update_callback: called with the new value and the object (optional)
        :param schema: a marshmallow field used to validate update values (optional)
        """
        self.name = name
        self.get_callback = get_callback
        self.update_callback = update_callback
        self.schema = schema

    def get_ma_field(self):
        return ma.fields.Function(serialize=self.get_callback, data_key=self.name)

    def load(self, value):
        if self.schema is None:
            return value
        schema = self.schema() if isinstance(self.schema, type) else self.schema
        return schema.deserialize(value)

    def __repr__(self):
        return '<RestField({})>'.format(self.name)


class RestRegistrar:
    """
    Registers additional fields on REST resources and applies them to
    responses and update requests.

    >>> rest = RestRegistrar()
    >>> rest.register_field('team', 'bio', get_callback=lambda obj: 'Hello')
    >>> rest.prepare('team', {'id': 1, 'title': 'Team'})
    {'id': 1, 'title': 'Team', 'bio': 'Hello'}
    """

    def __init__(self):
        self.resources = defaultdict(OrderedDict)

    def register_field(self, resource_name, field_name, get_callback=None, update_callback=None, schema=None):
        """
        Register a field, replacing any field of the same name on the resource.

        :param str resource_name: the REST resource (object type)
        :param str field_name: the field name
        """
        field = RestField(field_name, get_callback, update_callback, schema)
        self.resources[resource_name][field_name] = field
        logger.info('registered rest field: {}.{}'.format(resource_name, field_name))
        return field

    def fields(self, resource_name):
        """
        Fields registered on a resource, keyed by name.
        """
        if resource_name not in self.resources:
            return dict()
        return dict(self.resources[resource_name])

    def get_schema(self, resource_name):
        fields = {'_{}'.format(i): field.get_ma_field()
                  for i, field in enumerate(self.resources[resource_name].values())
                  if callable(field.get_callback)}
        schema = type('{}Schema'.format(resource_name.title().replace('-', '')), (ma.Schema,), fields)
        return schema()

    def prepare(self, resource_name, data):
        """
        Add the registered fields to a prepared response.

        :param str resource_name: the REST resource
        :param dict data: the prepared response, with an ``id`` entry
        :return: a new response dictionary
        """
        if resource_name not in self.resources:
            return dict(data)
        return {**data, **self.get_schema(resource_name).dump(data)}

    def update(self, resource_name, obj, request):
        """
        Apply the update callbacks of the fields present in an update request.

        :param str resource_name: the REST resource
        :param obj: the object being updated
        :param dict request: the request data, keyed by field name
        :return: the update callback results, keyed by field name
        """
        if resource_name not in self.resources:
            raise NotFound(resource_name)

        result = dict()
        for name, field in self.resources[resource_name].items():
            if name not in request or not callable(field.update_callback):
                continue
            try:
                value = field.load(request[name])
            except ma.ValidationError as e:
                raise APIError('{} | {}'.format(name, '; '.join(e.messages)), resource_name)
            result[name] = field.update_callback(value, obj)
        return result

    def __repr__(self):
        return '<RestRegistrar({})>'.format(', '.join(self.resources))
