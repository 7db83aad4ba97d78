from collections.abc import Mapping, Sequence


def v(val):
    if isinstance(val, (str, Mapping)) or not isinstance(val, Sequence):
        yield val
    else:
        for item in val:
            yield item


def resolve_key(prefix, short_key):
    """
    Namespace a short key.

    >>> resolve_key('crossfield_team', 'bio')
    'crossfield_team_bio'
    """
    return '{}_{}'.format(prefix, short_key)


def strip_key_prefix(key, prefix):
    """
    Remove a leading ``prefix + '_'`` segment from a key.

    >>> strip_key_prefix('crossfield_team_bio', 'crossfield_team')
    'bio'
    """
    if not prefix:
        return key
    head = '{}_'.format(prefix)
    return key[len(head):] if key.startswith(head) else key


def get_object_id(obj):
    """
    Object id of a prepared response (``id`` entry) or of an object (``ID`` or ``id``).
    """
    if isinstance(obj, Mapping):
        return obj['id'] if 'id' in obj else obj.get('ID')
    if hasattr(obj, 'ID'):
        return obj.ID
    return getattr(obj, 'id', None)
