"""
Request construction, authentication, response decoding and audio
helpers shared by the Watson service wrappers.
"""

from watson_developer_cloud.common.authentication import (  # noqa: F401
    APIKeyAuthentication,
    BasicAuthentication,
    BearerTokenAuthentication,
    IAMAuthentication,
    NoAuthentication,
    WatsonAuthenticationError,
    get_authenticator_from_environment,
)
from watson_developer_cloud.common.rest import (  # noqa: F401
    DetailedResponse,
    MultipartForm,
    RestRequest,
    WatsonApiError,
    WatsonError,
    WatsonNoEndpointError,
    WatsonSerializationError,
)
from watson_developer_cloud.common.service import FileWithMetadata, WatsonService  # noqa: F401
