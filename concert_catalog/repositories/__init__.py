from .base import BaseRepository
from .country_repository import country_repository
from .location_repository import location_repository
from .concert_repository import concert_repository
from .artist_repository import artist_repository
from .user_repository import user_repository
