import pytest

from metamodel.exc import Error
from metamodel.model import Model
from metamodel.registry import ModelRegistry
from metamodel.tests.model import Sponsor, TeamMemberModel, TeamModel


class FooModel(Model):
    pass


class FooBar(Model):
    pass


class InvalidNameModel(Model):
    name = 1


class InvalidPrefixModel(Model):
    prefix = ('cf',)


def test_name():
    assert TeamModel.get_name() == 'team'
    assert TeamMemberModel.get_name() == 'team_member'
    assert Sponsor.get_name() == 'sponsors'
    assert FooModel.get_name() == 'foo'
    assert FooBar.get_name() == 'foo_bar'
    with pytest.raises(Error):
        InvalidNameModel.get_name()


def test_prefix():
    assert TeamModel.get_prefix() == 'crossfield_team'
    assert Sponsor.get_prefix() == 'sponsors'
    assert FooModel.get_prefix() == 'foo'
    with pytest.raises(Error):
        InvalidPrefixModel.get_prefix()


def test_register_model():
    registry = ModelRegistry()
    registry.register_model(Sponsor)
    registry.register_model(FooModel)
    assert registry.get_field('sponsors', 'website') == 'sponsors_website'
    assert registry.get('foo') == ()
