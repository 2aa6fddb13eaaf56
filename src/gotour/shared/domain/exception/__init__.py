from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import (
    ForbiddenException as ForbiddenException,
)
from .exceptions import (
    InvalidPaymentStatusException as InvalidPaymentStatusException,
)
from .exceptions import (
    InvalidStatusException as InvalidStatusException,
)
from .exceptions import (
    OptimisticLockException as OptimisticLockException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    SubjectNotFoundException as SubjectNotFoundException,
)
from .exceptions import (
    TerminalStateViolationException as TerminalStateViolationException,
)
from .exceptions import (
    UpstreamUnavailableException as UpstreamUnavailableException,
)
from .exceptions import (
    ValidationException as ValidationException,
)
