# models_bootstrap.py
from worker import models as _worker_models
from assignment import models as _assignment_models
