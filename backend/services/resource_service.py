"""Operations shared by every resource router.

Each function performs one store call. Failures are raised as:
    - InvalidObjectIdError (ValueError): malformed identifier in the path.
    - DocumentNotFoundError (LookupError): the filter matched nothing.
    - pymongo.errors.PyMongoError, or bson/ValueError/OverflowError from
      encoding the document: anything the driver reports.
"""

from dataclasses import dataclass

from services import resource_store
from services.resource_store import ResourceStore, UpdateOutcome
from utils.object_ids import id_filter, lenient_id_filter


@dataclass(frozen=True)
class Resource:
    """One resource type: its collection and how it is named in messages."""

    collection: str
    label: str  # "Pull request added"

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"


USER = Resource(resource_store.USERS, "User")
REPOSITORY = Resource(resource_store.REPOSITORIES, "Repository")
ISSUE = Resource(resource_store.ISSUES, "Issue")
PULL_REQUEST = Resource(resource_store.PULL_REQUESTS, "Pull request")
COMMIT = Resource(resource_store.COMMITS, "Commit")
FORK = Resource(resource_store.FORKS, "Fork")
STAR = Resource(resource_store.STARS, "Star")

NO_COMMITS_MESSAGE = "No commits found for the given repoId."


class DocumentNotFoundError(LookupError):
    """Raised when a write or lookup matched zero documents."""

    def __init__(self, resource: Resource, message: str | None = None):
        super().__init__(message or resource.not_found_message)


def list_resource(store: ResourceStore, resource: Resource) -> list[dict]:
    """Return every document in the resource's collection, unfiltered."""
    return store.list_documents(resource.collection)


def create_resource(store: ResourceStore, resource: Resource, document: dict) -> str:
    """Insert the document as-is and return the new identifier as a string."""
    inserted_id = store.insert_document(resource.collection, document)
    return str(inserted_id)


def replace_resource(
    store: ResourceStore, resource: Resource, document_id: str, document: dict
) -> UpdateOutcome:
    """Replace a whole document by identifier.

    Raises:
        InvalidObjectIdError: If document_id is not a valid ObjectId string.
        DocumentNotFoundError: If no document has that identifier.
    """
    query = id_filter(document_id)
    outcome = store.replace_document(resource.collection, query, document)
    if not outcome.matched_count:
        raise DocumentNotFoundError(resource)
    return outcome


def patch_resource(
    store: ResourceStore, resource: Resource, document_id: str, fields: dict
) -> UpdateOutcome:
    """Merge fields into a document with `$set`.

    Raises:
        InvalidObjectIdError: If document_id is not a valid ObjectId string.
        DocumentNotFoundError: If no document has that identifier.
    """
    query = id_filter(document_id)
    outcome = store.update_fields(resource.collection, query, fields)
    if not outcome.matched_count:
        raise DocumentNotFoundError(resource)
    return outcome


def update_issue_status(store: ResourceStore, issue_id: str, status) -> UpdateOutcome:
    """Set only the `status` field of an issue."""
    return patch_resource(store, ISSUE, issue_id, {"status": status})


def delete_resource(store: ResourceStore, resource: Resource, document_id: str) -> int:
    """Delete a document by identifier and return the deleted count.

    Raises:
        InvalidObjectIdError: If document_id is not a valid ObjectId string.
        DocumentNotFoundError: If no document has that identifier.
    """
    deleted = store.delete_document(resource.collection, id_filter(document_id))
    if not deleted:
        raise DocumentNotFoundError(resource)
    return deleted


def delete_resource_lenient(store: ResourceStore, resource: Resource, document_id: str) -> int:
    """Delete by identifier, matching `_id` literally when it is not an ObjectId.

    Raises:
        DocumentNotFoundError: If nothing matched either way.
    """
    deleted = store.delete_document(resource.collection, lenient_id_filter(document_id))
    if not deleted:
        raise DocumentNotFoundError(resource)
    return deleted


def list_commits_for_repo(store: ResourceStore, repo_id: str) -> list[dict]:
    """Return commits whose `repoId` field equals repo_id exactly.

    The path value is compared as a string; it is never coerced to an ObjectId.

    Raises:
        DocumentNotFoundError: If no commit matches.
    """
    commits = store.list_documents(COMMIT.collection, {"repoId": repo_id})
    if not commits:
        raise DocumentNotFoundError(COMMIT, NO_COMMITS_MESSAGE)
    return commits
