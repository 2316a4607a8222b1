"Observers get notified about the progress of a route search"

from .abstract import SearchObserver
from .simple_observer import SimpleObserver, AttemptedRoute
