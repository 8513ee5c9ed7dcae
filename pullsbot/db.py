import os

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure, ConfigurationError

from pullsbot.constants import (
    MONGODB_DATABASE,
    MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    MONGODB_TEAMS_COLLECTION,
)
from pullsbot.logger import logger

_teams: Collection | None = None


def get_teams_collection() -> Collection:
    """
    Connect to MongoDB on first use and return the collection holding
    team -> snippets documents.
    """
    global _teams
    if _teams is not None:
        return _teams

    try:
        mongo_url = os.environ.get("MONGO_URL")
        if not mongo_url:
            raise ValueError("MONGO_URL environment variable is not set")

        client = MongoClient(mongo_url, serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT_MS)
        # Test the connection
        client.admin.command("ping")
        teams = client[MONGODB_DATABASE][MONGODB_TEAMS_COLLECTION]

        try:
            teams.create_index("key", unique=True)
            logger.debug("Teams collection index created/verified")
        except Exception as e:
            logger.warning("Could not create index on teams collection: %s", e)

        logger.info("MongoDB connection established successfully")
    except (ConnectionFailure, ConfigurationError, ValueError) as e:
        logger.critical("Failed to connect to MongoDB: %s", e)
        raise
    except Exception as e:
        logger.critical("Unexpected error connecting to MongoDB: %s", e)
        raise

    _teams = teams
    return _teams
