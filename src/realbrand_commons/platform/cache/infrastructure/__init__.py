"""Cache infrastructure: tier repositories, serializers and configuration."""

from .configuration import *
from .repositories import *
from .serializers import *
