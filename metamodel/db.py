import os

import sqlalchemy as sa

from metamodel.log import log_query
from metamodel.store import MetaStore, ObjectKind

DATABASE_URL = os.environ.get('METAMODEL_DATABASE_URL', 'sqlite://')
"""
The default database url, used by :func:`create_store`.
"""

metadata = sa.MetaData()


def meta_table(name):
    return sa.Table(
        name, metadata,
        sa.Column('meta_id', sa.Integer, primary_key=True),
        sa.Column('object_id', sa.String(64), nullable=False, index=True),
        sa.Column('meta_key', sa.String(255), nullable=False, index=True),
        sa.Column('meta_value', sa.JSON))


post_meta_t = meta_table('post_meta')
user_meta_t = meta_table('user_meta')
term_meta_t = meta_table('term_meta')

meta_tables = {
    ObjectKind.POST: post_meta_t,
    ObjectKind.USER: user_meta_t,
    ObjectKind.TERM: term_meta_t,
}


class SQLMetaStore(MetaStore):
    """
    A metadata store backed by one meta table per object kind.

    >>> store = SQLMetaStore(sa.create_engine('sqlite://'))
    >>> store.create_tables()
    >>> store.write_meta('post', 1, 'crossfield_team_bio', 'Hello')
    True
    >>> store.read_meta('post', 1, 'crossfield_team_bio')
    'Hello'
    """

    def __init__(self, engine):
        self.engine = engine

    def create_tables(self):
        metadata.create_all(self.engine)

    def drop_tables(self):
        metadata.drop_all(self.engine)

    @staticmethod
    def where(table, object_id, key):
        return sa.and_(table.c.object_id == str(object_id), table.c.meta_key == key)

    def get_meta(self, kind, object_id, key):
        table = meta_tables[kind]
        query = sa.select(table.c.meta_value).where(
            self.where(table, object_id, key)).order_by(table.c.meta_id).limit(1)
        log_query(query)
        with self.engine.connect() as conn:
            row = conn.execute(query).first()
        return '' if row is None or row.meta_value is None else row.meta_value

    def update_meta(self, kind, object_id, key, value):
        table = meta_tables[kind]
        query = sa.select(table.c.meta_id, table.c.meta_value).where(self.where(table, object_id, key))
        log_query(query)
        with self.engine.begin() as conn:
            rows = conn.execute(query).fetchall()
            if not rows:
                query = table.insert().values(object_id=str(object_id), meta_key=key, meta_value=value)
            elif all(row.meta_value == value for row in rows):
                return False
            else:
                query = table.update().where(self.where(table, object_id, key)).values(meta_value=value)
            log_query(query)
            conn.execute(query)
        return True

    def __repr__(self):
        return '<SQLMetaStore({})>'.format(self.engine.url)


def create_store(url=None, **kwargs):
    """
    Create an :class:`SQLMetaStore` and its tables.

    :param str url: database url, defaults to ``METAMODEL_DATABASE_URL``
    :param kwargs: passed to :func:`sqlalchemy.create_engine`
    """
    store = SQLMetaStore(sa.create_engine(url or DATABASE_URL, **kwargs))
    store.create_tables()
    return store
