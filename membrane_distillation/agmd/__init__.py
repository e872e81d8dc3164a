"""
agmd: constitutive physics for air gap membrane distillation (AGMD / V-AGMD).
"""

from . import constants
from . import properties
from . import membrane
from . import channel
from . import polarization
from . import config
from . import node
from . import sweep
from . import validation
