from showcase.client.http import HttpClient
from showcase.client.retry import RetryPolicy
from showcase.client.store import CollectionStore, EntitySchema
from showcase.models.models.gallery import GalleryCategory, GalleryRecord, GallerySection
from showcase.models.models.projects import ProjectRecord, ProjectSection

PROJECTS_SCHEMA: EntitySchema[ProjectRecord] = EntitySchema(
    resource="/api/projects",
    record_model=ProjectRecord,
    label="Project",
    enum_fields={"section": ProjectSection},
    require_image=True,
    paginated=False,
)

GALLERY_SCHEMA: EntitySchema[GalleryRecord] = EntitySchema(
    resource="/api/gallery",
    record_model=GalleryRecord,
    label="Gallery item",
    enum_fields={"category": GalleryCategory, "section": GallerySection},
    required_fields=("category", "section"),
    require_image=True,
    paginated=True,
)

VALID_GALLERY_CATEGORIES = [member.value for member in GalleryCategory]
VALID_GALLERY_SECTIONS = [member.value for member in GallerySection]
VALID_PROJECT_SECTIONS = [member.value for member in ProjectSection]


def projects_store(client: HttpClient, retry_policy: RetryPolicy | None = None, **kwargs):
    return CollectionStore(client, PROJECTS_SCHEMA, retry_policy=retry_policy, **kwargs)


def gallery_store(client: HttpClient, retry_policy: RetryPolicy | None = None, **kwargs):
    return CollectionStore(client, GALLERY_SCHEMA, retry_policy=retry_policy, **kwargs)
