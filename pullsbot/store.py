"""
Persistent key-value store for team -> snippets associations.

Each key is a team name or a Slack user id; its value is the list of snippets.
"""
from datetime import datetime

from pymongo.collection import Collection

from pullsbot.logger import logger


class MongoBrain:
    """
    Key-value view over a MongoDB collection of ``{"key": ..., "snippets": [...]}``
    documents.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def get(self, key: str):
        """Return the stored value for ``key``, or None when nothing is stored."""
        doc = self.collection.find_one({"key": key})
        if not doc:
            return None
        return doc.get("snippets")

    def set(self, key: str, value: list[str]) -> None:
        logger.debug("Storing %s snippet(s) for key=%s", len(value), key)
        self.collection.update_one(
            {"key": key},
            {
                "$set": {
                    "snippets": list(value),
                    "updated_at": datetime.utcnow().isoformat() + "Z",
                }
            },
            upsert=True,
        )

    def delete(self, key: str) -> None:
        logger.debug("Deleting key=%s", key)
        self.collection.delete_one({"key": key})

    def keys(self) -> list[str]:
        return sorted(
            doc["key"]
            for doc in self.collection.find({}, {"key": 1})
            if doc.get("key")
        )
