"""
Database Module
-------------
MongoDB access for campgrounds and their reviews.

A `Database` is constructed explicitly (at app startup or by the seed
script) and passed to whoever needs it, then closed on shutdown.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pydantic import BaseModel
from pymongo import MongoClient, ReturnDocument

from errors import NotFoundError
from schemas import CAMPGROUNDS, REVIEWS, Campground, Review

logger = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc)


def to_object_id(value: Union[str, ObjectId]) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def _review_from_doc(doc: Dict[str, Any]) -> Review:
    data = {k: v for k, v in doc.items() if k != "_id"}
    return Review(id=str(doc["_id"]), **data)


def _campground_from_doc(doc: Dict[str, Any], reviews: Optional[List[Review]] = None) -> Campground:
    data = {k: v for k, v in doc.items() if k not in ("_id", "reviews")}
    return Campground(
        id=str(doc["_id"]),
        review_ids=[str(r) for r in doc.get("reviews", [])],
        reviews=reviews or [],
        **data,
    )


class Database:
    def __init__(self, client: MongoClient, name: str):
        self.client = client
        self.name = name
        self.db = client[name]

    @classmethod
    def connect(cls, url: str, name: str) -> "Database":
        logger.info("Connecting to MongoDB database %r", name)
        return cls(MongoClient(url), name)

    def close(self):
        self.client.close()
        logger.info("Database connection closed")

    def ping(self) -> bool:
        self.client.admin.command("ping")
        return True

    def collection_names(self) -> List[str]:
        return self.db.list_collection_names()

    # ------- Generic helpers -------

    def create_document(self, collection: str, data: Union[BaseModel, Dict[str, Any]]) -> str:
        """Insert a document stamped with created_at/updated_at and return its id."""
        if isinstance(data, BaseModel):
            doc = data.model_dump()
        else:
            doc = dict(data)
        now = _now()
        doc["created_at"] = now
        doc["updated_at"] = now
        result = self.db[collection].insert_one(doc)
        return str(result.inserted_id)

    def get_documents(self, collection: str, filter_dict: Optional[Dict[str, Any]] = None,
                      limit: Optional[int] = None) -> List[Dict[str, Any]]:
        cursor = self.db[collection].find(filter_dict or {})
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    # ------- Campgrounds -------

    def list_campgrounds(self) -> List[Campground]:
        return [_campground_from_doc(d) for d in self.get_documents(CAMPGROUNDS)]

    def get_campground(self, campground_id: str, with_reviews: bool = False) -> Campground:
        oid = to_object_id(campground_id)
        doc = self.db[CAMPGROUNDS].find_one({"_id": oid}) if oid else None
        if doc is None:
            raise NotFoundError("Campground not found")
        if not with_reviews:
            return _campground_from_doc(doc)

        # Expand references in list order; dangling ids are skipped.
        ref_ids = doc.get("reviews", [])
        found = {d["_id"]: d for d in self.get_documents(REVIEWS, {"_id": {"$in": ref_ids}})}
        reviews = [_review_from_doc(found[r]) for r in ref_ids if r in found]
        return _campground_from_doc(doc, reviews)

    def create_campground(self, data: BaseModel) -> str:
        doc = data.model_dump()
        doc["reviews"] = []
        campground_id = self.create_document(CAMPGROUNDS, doc)
        logger.info("Created campground %s", campground_id)
        return campground_id

    def update_campground(self, campground_id: str, data: BaseModel) -> Campground:
        oid = to_object_id(campground_id)
        updated = None
        if oid:
            changes = data.model_dump(exclude_unset=True)
            changes["updated_at"] = _now()
            updated = self.db[CAMPGROUNDS].find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        if updated is None:
            raise NotFoundError("Campground not found")
        logger.info("Updated campground %s", campground_id)
        return _campground_from_doc(updated)

    def delete_campground(self, campground_id: str) -> bool:
        """Delete a campground and the reviews it references."""
        oid = to_object_id(campground_id)
        doc = self.db[CAMPGROUNDS].find_one_and_delete({"_id": oid}) if oid else None
        if doc is None:
            logger.info("Delete requested for missing campground %s", campground_id)
            return False
        ref_ids = doc.get("reviews", [])
        if ref_ids:
            removed = self.db[REVIEWS].delete_many({"_id": {"$in": ref_ids}}).deleted_count
            logger.info("Removed %d reviews of campground %s", removed, campground_id)
        logger.info("Deleted campground %s", campground_id)
        return True

    def clear_campgrounds(self) -> int:
        self.db[REVIEWS].delete_many({})
        return self.db[CAMPGROUNDS].delete_many({}).deleted_count

    # ------- Reviews -------

    def add_review(self, campground_id: str, data: BaseModel) -> str:
        """
        Attach a new review to a campground.

        The reference is pushed onto the campground first and the review
        inserted second. If the insert fails the reference is pulled back
        out so the campground never points at a missing review.
        """
        oid = to_object_id(campground_id)
        review_oid = ObjectId()
        result = self.db[CAMPGROUNDS].update_one(
            {"_id": oid}, {"$push": {"reviews": review_oid}, "$set": {"updated_at": _now()}}
        ) if oid else None
        if result is None or result.matched_count == 0:
            raise NotFoundError("Campground not found")

        doc = data.model_dump()
        doc["_id"] = review_oid
        try:
            self.create_document(REVIEWS, doc)
        except Exception:
            logger.error("Saving review failed, detaching it from campground %s", campground_id)
            self.db[CAMPGROUNDS].update_one({"_id": oid}, {"$pull": {"reviews": review_oid}})
            raise
        logger.info("Added review %s to campground %s", review_oid, campground_id)
        return str(review_oid)

    def delete_review(self, campground_id: str, review_id: str) -> bool:
        """Detach a review from its campground and delete it. The review must belong to that campground."""
        oid = to_object_id(campground_id)
        review_oid = to_object_id(review_id)
        detached = 0
        if oid and review_oid:
            detached = self.db[CAMPGROUNDS].update_one(
                {"_id": oid, "reviews": review_oid}, {"$pull": {"reviews": review_oid}}
            ).modified_count
        if detached != 1:
            raise NotFoundError("Review not found")
        self.db[REVIEWS].delete_one({"_id": review_oid})
        logger.info("Deleted review %s of campground %s", review_id, campground_id)
        return True
