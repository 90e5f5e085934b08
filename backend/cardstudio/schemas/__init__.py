from cardstudio.schemas.profile import (
    ProfileCreate,
    ProfileUpdate,
    ProfileResponse,
    ProfileEnvelope,
    ProfileListResponse,
)
from cardstudio.schemas.design import (
    DesignCreate,
    DesignUpdate,
    DesignResponse,
    DesignEnvelope,
    DesignListResponse,
)

__all__ = [
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileResponse",
    "ProfileEnvelope",
    "ProfileListResponse",
    "DesignCreate",
    "DesignUpdate",
    "DesignResponse",
    "DesignEnvelope",
    "DesignListResponse",
]
