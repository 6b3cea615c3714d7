"""Health check HTTP endpoint."""

from typing import Dict

from firebase_functions import https_fn, options
from storefront.apis.Db import Db
from storefront.config.env_loader import get_storefront_config
from storefront.util.cors_response import preflight_response, create_cors_response
from storefront.util.logger import get_logger

logger = get_logger(__name__)

# Collections the storefront cannot serve a page without
PROBED_COLLECTIONS = ("users", "products")


def probe_collections(db: Db) -> Dict[str, str]:
    """Run a one-document read against each collection the storefront depends on."""
    results = {}
    for name in PROBED_COLLECTIONS:
        try:
            db.collections[name].limit(1).get()
            results[name] = "healthy"
        except Exception as e:
            logger.error(f"Health probe of {name} failed: {e}")
            results[name] = "unhealthy"
    return results


@https_fn.on_request(
    ingress=options.IngressSetting.ALLOW_ALL,
    timeout_sec=30,
)
def health_check(req: https_fn.Request):
    """Report whether role lookups and the catalog can be served.

    Returns 200 when every probed collection answers, 503 otherwise.
    """
    preflight = preflight_response(req, ["GET", "OPTIONS"])
    if preflight is not None:
        return preflight

    try:
        db = Db.get_instance()
        collections = probe_collections(db)
        healthy = all(status == "healthy" for status in collections.values())

        body = {
            "status": "healthy" if healthy else "degraded",
            "timestamp": db.timestamp_now().isoformat(),
            "environment": get_storefront_config()["env"],
            "roleLookup": collections["users"],
            "catalog": collections["products"],
        }
        if not healthy:
            logger.warning(f"Storefront degraded: {collections}")
        return create_cors_response(body, 200 if healthy else 503)

    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return create_cors_response({"status": "unhealthy", "error": str(e)}, status=503)
