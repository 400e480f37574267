"""
Resource descriptors.

Each listing kind is described once here; app.api.routes.resource_router
turns a descriptor into the full set of list/search/CRUD endpoints.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Type

from app.core.permissions import AccessPolicy, Role
from app.db.mongodb import COLLECTIONS
from app.schemas.schemas import (
    JobPayload, MarketplacePayload, ResourcePayload, SchemePayload, TrainingPayload
)
from app.utils.filters import FilterField

LANGUAGE = FilterField("language", exact=True)


@dataclass(frozen=True)
class ResourceDescriptor:
    key: str                                # URL segment, e.g. "jobs"
    collection: str                         # MongoDB collection name
    payload_model: Type[ResourcePayload]
    filter_fields: Tuple[FilterField, ...]  # recognised on GET /
    list_key: str                           # data.<list_key> in list responses
    item_key: str                           # data.<item_key> in single-record responses
    label: str                              # "Job" -> "Job not found"
    noun: str                               # "jobs" -> "You can only update your own jobs"
    policy: AccessPolicy = AccessPolicy()
    search_fields: Tuple[str, ...] = ()     # enables GET /search/{query}
    dimension: Optional[FilterField] = None  # enables GET /<dimension>/{value}

    @property
    def tag(self) -> str:
        return self.key.capitalize()


JOBS = ResourceDescriptor(
    key="jobs",
    collection=COLLECTIONS["jobs"],
    payload_model=JobPayload,
    filter_fields=(FilterField("category"), FilterField("location"), LANGUAGE),
    list_key="jobs",
    item_key="job",
    label="Job",
    noun="jobs",
)

TRAINING = ResourceDescriptor(
    key="training",
    collection=COLLECTIONS["training"],
    payload_model=TrainingPayload,
    filter_fields=(FilterField("type", exact=True), LANGUAGE),
    list_key="trainingContent",
    item_key="content",
    label="Training content",
    noun="training content",
    policy=AccessPolicy(
        create_roles=frozenset({Role.entrepreneur, Role.admin}),
        mutate_roles=frozenset({Role.entrepreneur, Role.admin}),
    ),
    dimension=FilterField("type", exact=True),
)

MARKETPLACE = ResourceDescriptor(
    key="marketplace",
    collection=COLLECTIONS["marketplace"],
    payload_model=MarketplacePayload,
    filter_fields=(FilterField("location"), LANGUAGE),
    list_key="marketplace",
    item_key="entry",
    label="Marketplace entry",
    noun="marketplace entries",
    search_fields=("businessName", "productService"),
)

# Schemes are managed by admins only; update/delete skip the ownership gate.
SCHEMES = ResourceDescriptor(
    key="schemes",
    collection=COLLECTIONS["schemes"],
    payload_model=SchemePayload,
    filter_fields=(FilterField("category"), LANGUAGE),
    list_key="schemes",
    item_key="scheme",
    label="Scheme",
    noun="schemes",
    policy=AccessPolicy(
        create_roles=frozenset({Role.admin}),
        mutate_roles=frozenset({Role.admin}),
        check_ownership=False,
    ),
    search_fields=("title", "description", "category"),
    dimension=FilterField("category"),
)

RESOURCES = (JOBS, TRAINING, MARKETPLACE, SCHEMES)
