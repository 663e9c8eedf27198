from . import crud_user
from . import crud_performer
from . import crud_booking
from . import crud_review
from . import crud_notification
from . import crud_message
from . import crud_gig_request
