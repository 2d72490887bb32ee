"""Store for author records."""

from authors_api.models.author import Author
from authors_api.schemas.author import AuthorDraft, AuthorRecord
from authors_api.store.base import EntityStore


class AuthorStore(EntityStore[Author, AuthorDraft, AuthorRecord]):
    model = Author
    draft_type = AuthorDraft
    record_type = AuthorRecord
    entity_name = 'Author'
