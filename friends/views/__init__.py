from .home_view import *
from .dashboard_view import *
from .friendship_views import *
