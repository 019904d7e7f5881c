from specgrade.infrastructure.loaders.openapi_loader import (
    SPEC_FILE_NAMES,
    OpenAPIFileLoader,
    find_spec_file,
    read_spec_file,
)

__all__ = ["SPEC_FILE_NAMES", "OpenAPIFileLoader", "find_spec_file", "read_spec_file"]
