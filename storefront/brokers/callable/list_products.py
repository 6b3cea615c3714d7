"""Admin product listing callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError
from storefront.models.function_types import ListProductsResponse
from storefront.models.util_types import Role
from storefront.services.catalog_service import CatalogStore
from storefront.services.derived_views import filter_products, product_stats
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def list_products_callable(req: https_fn.CallableRequest) -> ListProductsResponse:
    """All products, newest first, with admin dashboard stats.

    Optional ``category`` and ``search`` narrow the returned list; stats
    always cover the whole catalog.
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        products = CatalogStore().list()
        data = req.data or {}
        visible = filter_products(products, data.get("category"), data.get("search"))

        return ListProductsResponse(
            success=True,
            products=[product.model_dump(mode="json") for product in visible],
            stats=product_stats(products).model_dump(),
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to list products: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to fetch products"
        )
