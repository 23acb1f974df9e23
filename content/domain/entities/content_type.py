from pydantic import BaseModel, ConfigDict, constr


class ContentTypeDescriptor(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: constr(min_length=1, max_length=20)
    is_public: bool = False
    label: str


# Registered on every fresh install.
BUILTIN_CONTENT_TYPES: tuple[ContentTypeDescriptor, ...] = (
    ContentTypeDescriptor(name="post", is_public=True, label="Posts"),
    ContentTypeDescriptor(name="page", is_public=True, label="Pages"),
    ContentTypeDescriptor(name="attachment", is_public=True, label="Media"),
    ContentTypeDescriptor(name="revision", is_public=False, label="Revisions"),
    ContentTypeDescriptor(name="nav_menu_item", is_public=False, label="Navigation Menu Items"),
)
