from metamodel.fields import COLOR, EMAIL, NUMBER, TEXTAREA, MetaField
from metamodel.model import Model


def upper(value):
    return value.upper()


class TeamModel(Model):
    prefix = 'crossfield_team'
    fields = (MetaField('bio', TEXTAREA, show_in_rest=True),
              MetaField('email', EMAIL, show_in_rest=True),
              MetaField('wins', NUMBER, show_in_rest=True),
              MetaField('color', COLOR, show_in_rest=True, get_cb=upper),
              'title')


class TeamMemberModel(Model):
    prefix = 'crossfield_member'
    fields = ({'key': 'nickname', 'type': 'text', 'show_in_rest': True},
              {'key': 'notes', 'type': 'textarea'})


class Sponsor(Model):
    name = 'sponsors'
    fields = ('website',)
