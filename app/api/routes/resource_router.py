"""
Resource Routes (generic)

build_resource_router(descriptor) produces, under /<descriptor.key>:

GET    ""                  - List records (filters + page/limit)
GET    /search/{query}     - Free-text search (when search_fields is set)
GET    /<dimension>/{value} - List pinned to one dimension (when dimension is set)
GET    /{record_id}        - Get one record
POST   ""                  - Create record (auth + create roles)
PUT    /{record_id}        - Replace validated fields (auth + roles + ownership)
DELETE /{record_id}        - Delete record (auth + roles + ownership)

Reads are public. Every record returned carries created_by_name.
"""

import functools
import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from pymongo.database import Database

from app.core.auth import get_current_user
from app.core.config import get_settings
from app.core.exceptions import APIError, ForbiddenError, InternalError, NotFoundError
from app.core.permissions import Caller, can_create, can_mutate, has_role
from app.core.validation import require_valid
from app.db.mongodb import get_mongo_db
from app.resources import ResourceDescriptor
from app.services.record_service import RecordService, parse_object_id, serialize_docs
from app.services.user_service import UserService
from app.utils.filters import build_filter, build_search_filter, contains
from app.utils.pagination import Pager, get_pager

logger = logging.getLogger(__name__)


def handle_errors(action: str):
    """
    Let expected APIErrors through; turn anything else into InternalError.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except APIError:
                raise
            except Exception as exc:
                logger.exception("%s error", action)
                raise InternalError(str(exc), expose_detail=get_settings().is_development) from exc
        return wrapper
    return decorator


def build_resource_router(resource: ResourceDescriptor) -> APIRouter:
    """Create the APIRouter for one resource kind."""
    router = APIRouter(prefix=f"/{resource.key}", tags=[resource.tag])
    label = resource.label
    policy = resource.policy

    # ============================================================
    # HELPERS (closed over the descriptor)
    # ============================================================

    def records(db: Database) -> RecordService:
        return RecordService(db[resource.collection])

    async def enrich(db: Database, docs: List[dict]) -> List[dict]:
        enriched = await run_in_threadpool(UserService(db).attach_owner_names, docs)
        return serialize_docs(enriched)

    async def fetch_page(db: Database, query: Dict[str, Any], pager: Pager) -> Tuple[List[dict], dict]:
        docs, total = await run_in_threadpool(records(db).find_page, query, pager)
        return await enrich(db, docs), pager.metadata(total)

    async def load_existing(db: Database, record_id: str) -> Tuple[Any, dict]:
        oid = parse_object_id(record_id)
        doc = await run_in_threadpool(records(db).get_by_id, oid) if oid is not None else None
        if doc is None:
            raise NotFoundError(f"{label} not found")
        return oid, doc

    def check_role(caller: Caller) -> None:
        if not has_role(caller, policy.mutate_roles):
            raise ForbiddenError("Insufficient permissions")

    # ============================================================
    # READ
    # ============================================================

    @router.get("")
    @handle_errors(f"Get {resource.key}")
    async def list_records(
        request: Request,
        pager: Pager = Depends(get_pager),
        db: Database = Depends(get_mongo_db),
    ):
        """List records, newest first. Recognised filters depend on the resource."""
        query = build_filter(request.query_params, resource.filter_fields)
        items, pagination = await fetch_page(db, query, pager)
        return {
            "success": True,
            "data": {resource.list_key: items, "pagination": pagination},
        }

    if resource.search_fields:
        @router.get("/search/{query}")
        @handle_errors(f"Search {resource.key}")
        async def search_records(
            query: str,
            language: Optional[str] = Query(None),
            pager: Pager = Depends(get_pager),
            db: Database = Depends(get_mongo_db),
        ):
            """Case-insensitive search across the resource's text fields."""
            mongo_query = build_search_filter(query, resource.search_fields, language)
            items, pagination = await fetch_page(db, mongo_query, pager)
            return {
                "success": True,
                "data": {"results": items, "pagination": pagination},
            }

    if resource.dimension is not None:
        dimension = resource.dimension

        @router.get(f"/{dimension.name}/{{value}}")
        @handle_errors(f"Get {resource.key} by {dimension.name}")
        async def list_by_dimension(
            value: str,
            language: Optional[str] = Query(None),
            pager: Pager = Depends(get_pager),
            db: Database = Depends(get_mongo_db),
        ):
            query: Dict[str, Any] = {dimension.name: value if dimension.exact else contains(value)}
            if language:
                query["language"] = language
            items, pagination = await fetch_page(db, query, pager)
            return {
                "success": True,
                "data": {resource.list_key: items, "pagination": pagination},
            }

    @router.get("/{record_id}")
    @handle_errors(f"Get {resource.key} record")
    async def get_record(record_id: str, db: Database = Depends(get_mongo_db)):
        _, doc = await load_existing(db, record_id)
        [item] = await enrich(db, [doc])
        return {"success": True, "data": {resource.item_key: item}}

    # ============================================================
    # WRITE
    # ============================================================

    @router.post("", status_code=201)
    @handle_errors(f"Create {resource.key} record")
    async def create_record(
        payload: Any = Body(None),
        user: Caller = Depends(get_current_user),
        db: Database = Depends(get_mongo_db),
    ):
        if not can_create(policy, user):
            raise ForbiddenError("Insufficient permissions")

        value = require_valid(resource.payload_model, payload)
        doc = await run_in_threadpool(
            records(db).insert, value.model_dump(mode="json", exclude_none=True), user.identity.value
        )
        logger.info("%s %s created by %s", label, doc["_id"], user.identity)

        [item] = await enrich(db, [doc])
        return {
            "success": True,
            "message": f"{label} created successfully",
            "data": {resource.item_key: item},
        }

    @router.put("/{record_id}")
    @handle_errors(f"Update {resource.key} record")
    async def update_record(
        record_id: str,
        payload: Any = Body(None),
        user: Caller = Depends(get_current_user),
        db: Database = Depends(get_mongo_db),
    ):
        check_role(user)
        value = require_valid(resource.payload_model, payload)

        oid, existing = await load_existing(db, record_id)
        if not can_mutate(policy, user, existing.get("createdBy")):
            raise ForbiddenError(f"You can only update your own {resource.noun}")

        doc = await run_in_threadpool(
            records(db).update, oid, value.model_dump(mode="json", exclude_none=True)
        )
        if doc is None:
            # removed between the existence check and the write
            raise NotFoundError(f"{label} not found")

        [item] = await enrich(db, [doc])
        return {
            "success": True,
            "message": f"{label} updated successfully",
            "data": {resource.item_key: item},
        }

    @router.delete("/{record_id}")
    @handle_errors(f"Delete {resource.key} record")
    async def delete_record(
        record_id: str,
        user: Caller = Depends(get_current_user),
        db: Database = Depends(get_mongo_db),
    ):
        check_role(user)

        oid, existing = await load_existing(db, record_id)
        if not can_mutate(policy, user, existing.get("createdBy")):
            raise ForbiddenError(f"You can only delete your own {resource.noun}")

        deleted = await run_in_threadpool(records(db).delete, oid)
        if not deleted:
            raise NotFoundError(f"{label} not found")
        logger.info("%s %s deleted by %s", label, oid, user.identity)

        return {"success": True, "message": f"{label} deleted successfully"}

    return router
