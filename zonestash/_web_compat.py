from django.conf import settings  # noqa: F401
from django.core.exceptions import ImproperlyConfigured  # noqa: F401
from django.utils.functional import Promise  # noqa: F401
from django.utils.html import (
    escape,  # noqa: F401
    format_html,  # noqa: F401
)
from django.utils.http import urlencode  # noqa: F401
from django.utils.safestring import mark_safe  # noqa: F401
