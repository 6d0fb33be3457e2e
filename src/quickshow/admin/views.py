"""SQLAdmin model views for movies and shows."""

from sqladmin import ModelView

from quickshow.models.movie import Movie
from quickshow.models.show import Show


class MovieAdmin(ModelView, model=Movie):
    column_list = [
        Movie.id,
        Movie.title,
        Movie.release_date,
        Movie.original_language,
        Movie.vote_average,
        Movie.runtime,
    ]
    column_searchable_list = [Movie.title]
    column_sortable_list = [Movie.title, Movie.release_date]
    # Movies are only created from TMDb data by the ingestion service
    can_create = False


class ShowAdmin(ModelView, model=Show):
    column_list = [
        Show.id,
        Show.movie_id,
        Show.show_date_time,
        Show.show_price,
    ]
    column_searchable_list = [Show.movie_id]
    column_sortable_list = [Show.show_date_time, Show.show_price]
    column_default_sort = [(Show.show_date_time, False)]
    can_create = False
    can_edit = False
