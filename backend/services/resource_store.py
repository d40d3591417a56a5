"""MongoDB-backed store for the hosting service resources.

Every method performs exactly one driver call against one collection. Driver
errors (`pymongo.errors.PyMongoError`) are not caught here; callers decide how
to surface them.
"""

from dataclasses import dataclass

from bson import ObjectId
from pymongo.database import Database

# Collection names, one per resource type.
USERS = "users"
REPOSITORIES = "repositories"
ISSUES = "issues"
PULL_REQUESTS = "pullRequests"
COMMITS = "commits"
FORKS = "forks"
STARS = "stars"

COLLECTIONS = (USERS, REPOSITORIES, ISSUES, PULL_REQUESTS, COMMITS, FORKS, STARS)


@dataclass(frozen=True)
class UpdateOutcome:
    """Counts reported by the store for a replace or update."""

    matched_count: int
    modified_count: int


class ResourceStore:
    """Data-access object over a single MongoDB database."""

    def __init__(self, database: Database):
        self._database = database

    def _collection(self, name: str):
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        return self._database[name]

    def ping(self) -> None:
        """Round-trip to the server; raises if it is unreachable."""
        self._database.client.admin.command("ping")

    def list_documents(self, collection: str, query: dict | None = None) -> list[dict]:
        return list(self._collection(collection).find(query or {}))

    def insert_document(self, collection: str, document: dict) -> ObjectId:
        # insert_one adds `_id` to the dict it is given, so insert a copy.
        result = self._collection(collection).insert_one(dict(document))
        return result.inserted_id

    def replace_document(self, collection: str, query: dict, document: dict) -> UpdateOutcome:
        result = self._collection(collection).replace_one(query, dict(document))
        return UpdateOutcome(result.matched_count, result.modified_count)

    def update_fields(self, collection: str, query: dict, fields: dict) -> UpdateOutcome:
        result = self._collection(collection).update_one(query, {"$set": dict(fields)})
        return UpdateOutcome(result.matched_count, result.modified_count)

    def delete_document(self, collection: str, query: dict) -> int:
        result = self._collection(collection).delete_one(query)
        return result.deleted_count
