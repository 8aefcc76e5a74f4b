from app.utils.date_helpers import (
    today_in_timezone,
)
from app.utils.validators import (
    parse_price,
    clean_choices,
    validate_choice,
)
from app.utils.deal_helpers import (
    get_discount,
    store_filters,
    filter_by_store,
    group_by_category,
)
from app.utils.exceptions import (
    NotAuthenticatedException,
    ProfileAlreadyExistsException,
    AdminGateClosedException,
    AdminNotConfiguredException,
    OnboardingRequiredError,
)

__all__ = [
    # Dates
    "today_in_timezone",
    # Validators
    "parse_price",
    "clean_choices",
    "validate_choice",
    # Deals
    "get_discount",
    "store_filters",
    "filter_by_store",
    "group_by_category",
    # Exceptions
    "NotAuthenticatedException",
    "ProfileAlreadyExistsException",
    "AdminGateClosedException",
    "AdminNotConfiguredException",
    "OnboardingRequiredError",
]
