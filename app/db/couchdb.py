import logging

import pycouchdb

from app.settings import Settings, settings

logger = logging.getLogger(__name__)


def connect_couch(settings_obj: Settings = settings):
    """
    Open the CouchDB database handle used by every repo.
    Creates the database on first run. Raises if the server cannot be reached.
    """
    server = pycouchdb.Server(settings_obj.couchdb_url)
    info = server.info()
    logger.debug(f"CouchDB server version {info.get('version')}")

    try:
        return server.database(settings_obj.COUCHDB_DATABASE)
    except pycouchdb.exceptions.NotFound:
        logger.info(f"Creating CouchDB database {settings_obj.COUCHDB_DATABASE}")
        return server.create(settings_obj.COUCHDB_DATABASE)
