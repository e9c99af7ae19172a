# Schemas package (re-export feature modules for stable imports)
from .auth.auth import *
from .appointments.appointment import *
from .doctors.doctor import *
from .queue.queue import *
from .common.common import *
