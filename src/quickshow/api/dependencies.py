"""FastAPI dependencies wiring services to the request's database session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quickshow.database import get_db
from quickshow.repositories import MovieRepository, ShowRepository
from quickshow.services.show_ingestion import ShowIngestionService
from quickshow.services.show_queries import ShowQueryService
from quickshow.services.tmdb_client import TMDbClient


def get_tmdb_client() -> TMDbClient:
    return TMDbClient()


def get_ingestion_service(
    db: AsyncSession = Depends(get_db),
    tmdb_client: TMDbClient = Depends(get_tmdb_client),
) -> ShowIngestionService:
    return ShowIngestionService(MovieRepository(db), ShowRepository(db), tmdb_client)


def get_query_service(db: AsyncSession = Depends(get_db)) -> ShowQueryService:
    return ShowQueryService(MovieRepository(db), ShowRepository(db))
