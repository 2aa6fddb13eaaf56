from .auth_context import actor_from_event as actor_from_event
from .clock import Clock as Clock
from .clock import utc_now as utc_now
from .http_response import api_response as api_response
from .i18n import active_locale as active_locale
from .i18n import translate as translate
from .logger import get_logger as get_logger
from .retry import RetryPolicy as RetryPolicy
from .validators import to_decimal as to_decimal
from .validators import to_optional_decimal as to_optional_decimal
