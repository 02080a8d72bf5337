"""Tag entity for categorizing questions."""

from overflow.domain.model.common import DomainModel
from overflow.domain.value import TagId, TagName


class Tag(DomainModel):
    """Named topic label shared by many questions.

    Tags are created on demand the first time a question uses the name
    and are never deleted.
    """

    id: TagId
    name: TagName
