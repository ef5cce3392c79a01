"""
MongoDB repository for feedback records.
"""

from typing import List, Optional, Dict, Any
from datetime import datetime

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorDatabase,
    AsyncIOMotorCollection,
)

from ..interfaces.feedback_repository import (
    FeedbackRepository,
    FeedbackRepositoryError,
)
from ..models.feedback import Feedback, FeedbackQueryFilter, FeedbackAggregation
from ..models.sentiment import SentimentLabel
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="mongodb-feedback-repository",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

# Constants for index direction
ASCENDING = 1
DESCENDING = -1


class MongoDBFeedbackRepository(FeedbackRepository):
    """MongoDB repository for feedback records."""

    def __init__(
        self,
        mongo_url: str,
        database_name: str,
        collection_name: str = "feedback",
        client: Optional[AsyncIOMotorClient] = None,
    ):
        """
        Initialize repository.

        Args:
            mongo_url: MongoDB connection URL
            database_name: Database name
            collection_name: Feedback collection name
            client: Existing client to reuse instead of creating one
        """
        self.client: AsyncIOMotorClient = client or AsyncIOMotorClient(
            mongo_url, tz_aware=True
        )
        self.db: AsyncIOMotorDatabase = self.client[database_name]
        self.collection: AsyncIOMotorCollection = self.db[collection_name]

        logger.info(
            f"MongoDB feedback repository initialized with database: {database_name}"
        )

    async def initialize(self) -> None:
        """Create all necessary indexes for the collection."""
        try:
            indexes = [
                ([("created_at", DESCENDING)], {}),
                ([("sentiment", ASCENDING)], {}),
                ([("user_id", ASCENDING)], {}),
                ([("sentiment", ASCENDING), ("created_at", DESCENDING)], {}),
            ]

            for keys, kwargs in indexes:
                await self.collection.create_index(keys, **kwargs)

            logger.info("MongoDB feedback repository indexes created successfully")

        except Exception as e:
            logger.error(f"Failed to initialize MongoDB feedback repository indexes: {e}")
            raise FeedbackRepositoryError(f"Failed to initialize indexes: {e}")

    async def save_feedback(self, feedback: Feedback) -> str:
        try:
            await self.collection.replace_one(
                {"_id": feedback.id}, feedback.to_document(), upsert=True
            )
            logger.debug(f"Saved feedback: {feedback.id}")
            return feedback.id

        except Exception as e:
            logger.error(f"Failed to save feedback: {e}")
            raise FeedbackRepositoryError(
                f"Failed to save feedback: {e}", details={"feedback_id": feedback.id}
            )

    async def get_feedback(self, feedback_id: str) -> Optional[Feedback]:
        try:
            doc = await self.collection.find_one({"_id": feedback_id})
        except Exception as e:
            logger.error(f"Failed to get feedback: {e}")
            raise FeedbackRepositoryError(f"Failed to get feedback: {e}")
        return Feedback.from_document(doc) if doc else None

    async def list_feedback(self, filter_params: FeedbackQueryFilter) -> List[Feedback]:
        try:
            cursor = (
                self.collection.find(self._build_filter(filter_params))
                .sort("created_at", DESCENDING)
                .skip(filter_params.offset)
                .limit(filter_params.limit)
            )
            docs = await cursor.to_list(length=filter_params.limit)

        except Exception as e:
            logger.error(f"Failed to list feedback: {e}")
            raise FeedbackRepositoryError(f"Failed to list feedback: {e}")

        logger.debug(f"Found {len(docs)} feedback records for query")
        return [Feedback.from_document(doc) for doc in docs]

    async def count_feedback(self, filter_params: FeedbackQueryFilter) -> int:
        try:
            return await self.collection.count_documents(self._build_filter(filter_params))
        except Exception as e:
            logger.error(f"Failed to count feedback: {e}")
            raise FeedbackRepositoryError(f"Failed to count feedback: {e}")

    async def get_aggregation(
        self,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> FeedbackAggregation:
        match_filter = self._build_filter(
            FeedbackQueryFilter(date_from=date_from, date_to=date_to)
        )

        pipeline: List[Dict[str, Any]] = []
        if match_filter:
            pipeline.append({"$match": match_filter})
        pipeline.append(
            {
                "$group": {
                    "_id": "$sentiment",
                    "count": {"$sum": 1},
                    "score_sum": {"$sum": "$sentiment_score"},
                }
            }
        )

        try:
            groups = await self.collection.aggregate(pipeline).to_list(length=None)
        except Exception as e:
            logger.error(f"Failed to get feedback aggregation: {e}")
            raise FeedbackRepositoryError(f"Failed to get feedback aggregation: {e}")

        counts = {label: 0 for label in SentimentLabel}
        score_sum = 0.0
        for group in groups:
            try:
                label = SentimentLabel(group["_id"])
            except ValueError:
                logger.warning(f"Ignoring unknown sentiment label: {group['_id']}")
                continue
            counts[label] = group["count"]
            score_sum += group["score_sum"]

        return FeedbackAggregation.from_counts(
            counts=counts,
            score_sum=score_sum,
            time_period=FeedbackAggregation.describe_period(date_from, date_to),
        )

    async def delete_feedback(self, feedback_id: str) -> bool:
        try:
            result = await self.collection.delete_one({"_id": feedback_id})
        except Exception as e:
            logger.error(f"Failed to delete feedback: {e}")
            raise FeedbackRepositoryError(f"Failed to delete feedback: {e}")

        success = result.deleted_count > 0
        if success:
            logger.debug(f"Deleted feedback: {feedback_id}")
        return success

    async def ping(self) -> bool:
        try:
            await self.db.command("ping")
            return True
        except Exception as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False

    def _build_filter(self, filter_params: FeedbackQueryFilter) -> Dict[str, Any]:
        """Build MongoDB filter from query parameters."""
        mongo_filter: Dict[str, Any] = {}

        if filter_params.sentiment:
            mongo_filter["sentiment"] = filter_params.sentiment.value

        if filter_params.user_id:
            mongo_filter["user_id"] = filter_params.user_id

        if filter_params.date_from or filter_params.date_to:
            date_filter: Dict[str, datetime] = {}
            if filter_params.date_from:
                date_filter["$gte"] = filter_params.date_from
            if filter_params.date_to:
                date_filter["$lte"] = filter_params.date_to
            mongo_filter["created_at"] = date_filter

        return mongo_filter

    async def close(self) -> None:
        """Close the MongoDB connection."""
        self.client.close()
        logger.info("MongoDB feedback repository connection closed")
