"""MongoDB storage adapter for captain_claw."""

from captain_claw.infra.mongo.client import MongoClient
from captain_claw.infra.mongo.repositories import MongoStorageRepository

__all__ = ["MongoClient", "MongoStorageRepository"]
