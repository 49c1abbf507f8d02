# shop/services/gateway_service.py
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shop.domain.errors import MissingIdError, NotFoundError, PersistenceError
from shop.domain.registry import ModelPolicy, UploadArity
from shop.domain.schemas import CartIn
from shop.repos.model_repo import ModelRepo
from shop.services.cart_service import CartService
from shop.services.media_client import MediaClient, Uploadable
from shop.utils.logging import get_logger
from shop.utils.serialize import loader_options, to_dict

logger = get_logger(__name__)


class GatewayService:
    """
    Generic CRUD over every registered model.

    The caller resolves the ModelPolicy first, so an unknown model never
    reaches this class. Database failures are logged here and surface as
    PersistenceError with a fixed message; upload failures are not caught.
    """

    def __init__(self, db: Session, media_client: MediaClient | None = None):
        self.db = db
        self.media_client = media_client
        self.cart_service = CartService(db)

    # query
    def read(self, policy: ModelPolicy, raw_id: Any = None):
        repo = ModelRepo(self.db, policy.model)

        try:
            ident = policy.parse_id(raw_id)
        except ValueError:
            # a non-numeric id can never match a numeric key
            raise NotFoundError()

        try:
            if ident is None:
                rows = repo.find_many(options=loader_options(policy.model, policy.list_include))
                return [self._serialize(policy, row, policy.list_include) for row in rows]

            if policy.lookup_field:
                rows = repo.find_many(where={policy.lookup_field: ident})
                return [self._serialize(policy, row) for row in rows]

            item = repo.find_unique(ident)
        except SQLAlchemyError:
            logger.exception(f"Database GET error for {policy.name.value}")
            repo.rollback()
            raise PersistenceError("read")

        if item is None:
            raise NotFoundError()
        return self._serialize(policy, item)

    # commands
    def create(
        self,
        policy: ModelPolicy,
        fields: Mapping[str, Any],
        files: Sequence[Uploadable] = (),
    ) -> Dict[str, Any]:
        data = dict(fields)
        uploads = self._upload(policy, files)
        data.update(uploads)
        if policy.upload_arity is UploadArity.MANY:
            # on create the image list comes from the uploads only
            data[policy.upload_field] = uploads.get(policy.upload_field, [])

        if policy.priced_create:
            return self._create_cart(data)

        repo = ModelRepo(self.db, policy.model)
        try:
            for hook in policy.before_create:
                data = hook(data)
            item = repo.create(data)
        except (SQLAlchemyError, ValueError):
            logger.exception(f"Database POST error for {policy.name.value}")
            repo.rollback()
            raise PersistenceError("create")

        logger.info(f"Created {policy.name.value} {item.id}")
        return self._serialize(policy, item)

    def update(
        self,
        policy: ModelPolicy,
        fields: Mapping[str, Any],
        files: Sequence[Uploadable] = (),
        fallback_id: Any = None,
    ) -> Dict[str, Any]:
        data = dict(fields)
        # the primary key itself is never part of the update
        raw_id = data.pop("id", None) or fallback_id
        ident = self._require_id(policy, raw_id)

        data.update(self._upload(policy, files))

        repo = ModelRepo(self.db, policy.model)
        try:
            for hook in policy.before_update:
                data = hook(data)
            item = repo.update(ident, data)
        except (SQLAlchemyError, ValueError):
            logger.exception(f"Database PUT error for {policy.name.value} {ident!r}")
            repo.rollback()
            raise PersistenceError("update")

        logger.info(f"Updated {policy.name.value} {ident!r}: {sorted(data)}")
        return self._serialize(policy, item)

    def delete(self, policy: ModelPolicy, raw_id: Any) -> Dict[str, bool]:
        ident = self._require_id(policy, raw_id)

        repo = ModelRepo(self.db, policy.model)
        try:
            repo.delete(ident)
        except SQLAlchemyError:
            logger.exception(f"Database DELETE error for {policy.name.value} {ident!r}")
            repo.rollback()
            raise PersistenceError("delete")

        logger.info(f"Deleted {policy.name.value} {ident!r}")
        return {"success": True}

    # helpers
    def _create_cart(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            payload = CartIn.model_validate(data)
            return self.cart_service.create_cart(payload)
        except (SQLAlchemyError, ValidationError):
            logger.exception("Database POST error for cart")
            self.cart_service.repo.rollback()
            raise PersistenceError("create")

    @staticmethod
    def _require_id(policy: ModelPolicy, raw_id: Any):
        try:
            ident = policy.parse_id(raw_id)
        except ValueError:
            ident = None
        if ident is None:
            raise MissingIdError()
        return ident

    def _upload(self, policy: ModelPolicy, files: Sequence[Uploadable]) -> Dict[str, Any]:
        if policy.upload_arity is UploadArity.NONE or not files:
            return {}

        if policy.upload_arity is UploadArity.MANY:
            urls: List[str] = [self.media_client.upload(f).url for f in files]
            return {policy.upload_field: urls}

        asset = self.media_client.upload(files[0])
        return {policy.upload_field: asset.url}

    @staticmethod
    def _serialize(
        policy: ModelPolicy,
        item: Any,
        include: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return to_dict(item, include=include, hidden=policy.hidden_fields)
