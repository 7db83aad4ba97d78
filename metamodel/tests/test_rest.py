import marshmallow as ma
import pytest

from metamodel.exc import APIError, Error, NotFound
from metamodel.rest import RestRegistrar, get_error_object


def title(obj):
    return obj['title'].upper()


def test_register_field(rest):
    field = rest.register_field('team', 'bio', get_callback=title)
    assert rest.fields('team') == {'bio': field}
    assert field.get_callback is title
    assert field.update_callback is None
    assert field.schema is None


def test_register_field_replace(rest):
    rest.register_field('team', 'bio')
    field = rest.register_field('team', 'bio', get_callback=title)
    assert list(rest.fields('team').values()) == [field]


def test_fields_unknown_resource(rest):
    assert rest.fields('team') == {}
    assert 'team' not in rest.resources


def test_prepare(rest):
    rest.register_field('team', 'shout', get_callback=title)
    rest.register_field('team', 'id-copy', get_callback=lambda obj: obj['id'])
    rest.register_field('team', 'update-only', update_callback=lambda value, obj: True)
    data = {'id': 1, 'title': 'Team'}
    assert rest.prepare('team', data) == {'id': 1, 'title': 'Team', 'shout': 'TEAM', 'id-copy': 1}
    assert data == {'id': 1, 'title': 'Team'}


def test_prepare_unknown_resource(rest):
    data = {'id': 1}
    response = rest.prepare('team', data)
    assert response == data
    assert response is not data


def test_update(rest):
    updates = list()

    def update(value, obj):
        updates.append((value, obj))
        return True

    rest.register_field('team', 'bio', update_callback=update)
    rest.register_field('team', 'email', update_callback=update)
    rest.register_field('team', 'title', get_callback=title)
    result = rest.update('team', {'id': 1}, {'bio': 'Hello', 'title': 'ignored', 'other': 1})
    assert result == {'bio': True}
    assert updates == [('Hello', {'id': 1})]


def test_update_schema(rest):
    rest.register_field('team', 'wins', update_callback=lambda value, obj: value, schema=ma.fields.Integer())
    rest.register_field('team', 'losses', update_callback=lambda value, obj: value, schema=ma.fields.Integer)
    assert rest.update('team', {'id': 1}, {'wins': '5', 'losses': 2}) == {'wins': 5, 'losses': 2}
    with pytest.raises(APIError) as e:
        rest.update('team', {'id': 1}, {'wins': 'many'})
    assert e.value.status == 400
    assert str(e.value).startswith('[team] wins |')


def test_update_unknown_resource(rest):
    with pytest.raises(NotFound) as e:
        rest.update('team', {'id': 1}, {'bio': 'Hello'})
    assert e.value.status == 404


def test_error_object():
    error = get_error_object(NotFound('team'))
    assert error == {'errors': [{'title': '[team] resource not registered: team', 'status': 404}]}
    with pytest.raises(Error):
        get_error_object(Error('not an api error'))
