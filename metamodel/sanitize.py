import math
import re
from collections.abc import Mapping, Sequence

import marshmallow as ma
from marshmallow.validate import Regexp

from metamodel.fields import FieldType

TAG_RE = re.compile(r'<[^>]*>')
SCRIPT_RE = re.compile(r'<(script|style)[^>]*?>.*?</\1>', re.IGNORECASE | re.DOTALL)
LESS_THAN_RE = re.compile(r'<[^>]*?((?=<)|>|$)')
WHITESPACE_RE = re.compile(r'[\r\n\t ]+')
AMP_RE = re.compile(r'&(?!#?[a-zA-Z0-9]+;)')
OCTET_RE = re.compile(r'%[a-f0-9]{2}', re.IGNORECASE)
NUMBER_RE = re.compile(r'\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)')

EMAIL_LOCAL_RE = re.compile(r'[^a-zA-Z0-9!#$%&\'*+/=?^_`{|}~.-]')
EMAIL_LABEL_RE = re.compile(r'[^a-z0-9-]+', re.IGNORECASE)
EMAIL_TRIM = ' \t\n\r\0\x0B'

validate_hex_color = Regexp(r'^#([A-Fa-f0-9]{3}){1,2}$')


def _to_text(value):
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode('utf-8')
        except UnicodeDecodeError:
            return ''
    if value is None or isinstance(value, (Mapping, Sequence, set)):
        return ''
    if isinstance(value, bool):
        return '1' if value else ''
    return str(value)


def esc_html(text):
    """
    Escape HTML special characters, leaving existing entities alone.

    >>> esc_html('a < b &amp; c & "d"')
    'a &lt; b &amp; c &amp; &quot;d&quot;'
    """
    text = AMP_RE.sub('&amp;', text)
    return text.replace('<', '&lt;').replace('>', '&gt;').replace('"', '&quot;').replace("'", '&#039;')


def _escape_less_than(text):
    def escape(match):
        tag = match.group(0)
        return tag if tag.endswith('>') else esc_html(tag)
    return LESS_THAN_RE.sub(escape, text)


def strip_all_tags(text):
    return TAG_RE.sub('', SCRIPT_RE.sub('', text))


def _sanitize_text(value, keep_newlines=False):
    text = _to_text(value)
    if '<' in text:
        text = strip_all_tags(_escape_less_than(text))
        text = text.replace('<\n', '&lt;\n')
    if not keep_newlines:
        text = WHITESPACE_RE.sub(' ', text)
    text = text.strip()

    found = False
    while OCTET_RE.search(text):
        text = OCTET_RE.sub('', text)
        found = True
    if found:
        text = re.sub(r' +', ' ', text.strip())
    return text


def sanitize_text_field(value):
    """
    Plain single-line text: tags stripped, whitespace collapsed, octets removed.

    >>> sanitize_text_field(' <b>Hello</b>\\n  world %2F ')
    'Hello world'
    """
    return _sanitize_text(value)


def sanitize_textarea_field(value):
    """
    Like :func:`sanitize_text_field`, but line breaks are kept.
    """
    return _sanitize_text(value, keep_newlines=True)


def sanitize_email(value):
    """
    Strip characters not allowed in an email address.

    Returns an empty string if nothing resembling a valid address is left.

    >>> sanitize_email(' john(doe)@exa mple.com')
    'johndoe@example.com'
    """
    email = _to_text(value)
    if len(email) < 6 or email.find('@', 1) == -1:
        return ''

    local, domain = email.split('@', 1)
    local = EMAIL_LOCAL_RE.sub('', local)
    if not local:
        return ''

    domain = re.sub(r'\.{2,}', '', domain).strip(EMAIL_TRIM + '.')
    if not domain:
        return ''

    subs = domain.split('.')
    if len(subs) < 2:
        return ''
    subs = [EMAIL_LABEL_RE.sub('', sub.strip(EMAIL_TRIM + '-')) for sub in subs]
    subs = [sub for sub in subs if sub]
    if len(subs) < 2:
        return ''

    return '{}@{}'.format(local, '.'.join(subs))


def absint(value):
    """
    Convert a value to a non-negative integer.

    Strings are read up to the first non-numeric character.

    >>> absint('12abc'), absint('-5'), absint('abc'), absint(3.9)
    (12, 5, 0, 3)
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        return abs(int(value)) if math.isfinite(value) else 0
    if isinstance(value, bytes):
        value = _to_text(value)
    if isinstance(value, str):
        match = NUMBER_RE.match(value)
        if match is None:
            return 0
        number = match.group(1)
        try:
            return abs(int(number))
        except ValueError:
            number = float(number)
            return abs(int(number)) if math.isfinite(number) else 0
    if value is None:
        return 0
    return 1 if value else 0


def sanitize_hex_color(value):
    """
    A 3 or 6 digit hex color with a leading ``#``.

    Returns an empty string for an empty value and None for an invalid one.
    """
    if value == '':
        return ''
    if not isinstance(value, str):
        return None
    try:
        return validate_hex_color(value)
    except ma.ValidationError:
        return None


sanitizers = {
    FieldType.TEXT: sanitize_text_field,
    FieldType.EMAIL: sanitize_email,
    FieldType.TEXTAREA: sanitize_textarea_field,
    FieldType.NUMBER: absint,
    FieldType.COLOR: sanitize_hex_color,
}


def get_sanitizer(field):
    """
    The sanitizer to apply to a field value before it is stored.

    A callable ``sanitize_cb`` on the field takes precedence; otherwise the
    field type decides, falling back to :func:`sanitize_text_field`.
    """
    sanitize_cb = getattr(field, 'sanitize_cb', None)
    if callable(sanitize_cb):
        return sanitize_cb
    return sanitizers.get(FieldType.get(getattr(field, 'type_', None)), sanitize_text_field)
