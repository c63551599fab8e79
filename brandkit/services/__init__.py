"""Services layer - business logic between the API and the repositories."""

from brandkit.services.access import (
    AccessDeniedError,
    ProjectAccessPolicy,
    ProjectNotFoundError,
    is_owner,
)
from brandkit.services.auth import (
    AuthService,
    EmailTakenError,
    InvalidCredentialsError,
    UsernameTakenError,
)
from brandkit.services.brand_asset import (
    ColorNotFoundError,
    ColorService,
    TypographyNotFoundError,
    TypographyService,
)
from brandkit.services.export import (
    ExportFormatError,
    build_brand_json,
    css_variable_name,
    render_css,
    sanitize_filename,
)
from brandkit.services.member import (
    DuplicateMemberError,
    MemberNotFoundError,
    MemberService,
    MemberValidationError,
)
from brandkit.services.project import ProjectService, load_project_with_details
from brandkit.services.upload import (
    UploadStorage,
    UploadValidationError,
    get_upload_storage,
)

__all__ = [
    "AccessDeniedError",
    "AuthService",
    "ColorNotFoundError",
    "ColorService",
    "DuplicateMemberError",
    "EmailTakenError",
    "ExportFormatError",
    "InvalidCredentialsError",
    "MemberNotFoundError",
    "MemberService",
    "MemberValidationError",
    "ProjectAccessPolicy",
    "ProjectNotFoundError",
    "ProjectService",
    "TypographyNotFoundError",
    "TypographyService",
    "UploadStorage",
    "UploadValidationError",
    "UsernameTakenError",
    "build_brand_json",
    "css_variable_name",
    "get_upload_storage",
    "is_owner",
    "load_project_with_details",
    "render_css",
    "sanitize_filename",
]
