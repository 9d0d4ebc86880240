"""Cache domain core: entities, value objects and protocols."""

from .entities import *
from .value_objects import *
from .protocols import *
