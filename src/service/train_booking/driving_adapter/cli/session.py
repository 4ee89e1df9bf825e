from typing import Optional

import attrs

from src.service.train_booking.domain.value_object.credentials import Credentials


@attrs.define
class Session:
    """State carried between menu commands of one interactive run"""

    credentials: Optional[Credentials] = None
    selected_train_id: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return self.credentials is not None

    @property
    def has_selected_train(self) -> bool:
        return self.selected_train_id is not None
