from functools import lru_cache

from pymongo import MongoClient

from ataxx.config import get_settings


@lru_cache(maxsize=1)
def get_db():
    settings = get_settings()
    client = MongoClient(settings.mongo_uri)
    return client[settings.db_name]


def get_games_collection():
    return get_db()["games"]
