from tradequote.models.company import Company, AccountStatus
from tradequote.models.user import User, UserRole
from tradequote.models.branding import Branding
from tradequote.models.quote import Quote, QuoteStatus, QUOTE_STATUS_TRANSITIONS
