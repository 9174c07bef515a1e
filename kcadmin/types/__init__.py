from __future__ import annotations

from .clients import *
from .federated_identity import *
from .resources import *
from .roles import *
from .users import *
from ._base import Document, Representation, as_payload
