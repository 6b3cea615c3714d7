"""Customer shop listing callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError
from storefront.models.function_types import ShopResponse
from storefront.models.util_types import ALL_CATEGORIES, Category, Role
from storefront.services.catalog_service import CatalogStore
from storefront.services.derived_views import filter_products
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)

SHOP_CATEGORIES = [ALL_CATEGORIES] + [category.value for category in Category]


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def list_shop_products_callable(req: https_fn.CallableRequest) -> ShopResponse:
    """Active products for the shop, optionally narrowed by category and search.

    A concrete category is queried in Firestore; the search term is matched
    locally against name and description.
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.CUSTOMER)

        data = req.data or {}
        category = data.get("category") or ALL_CATEGORIES
        catalog = CatalogStore()

        if category == ALL_CATEGORIES:
            products = catalog.list_active()
        else:
            products = catalog.list_by_category(category)
        visible = filter_products(products, ALL_CATEGORIES, data.get("search"))

        return ShopResponse(
            success=True,
            products=[product.model_dump(mode="json") for product in visible],
            featured=[product.model_dump(mode="json") for product in catalog.featured()],
            categories=SHOP_CATEGORIES,
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to list shop products: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to fetch active products"
        )
