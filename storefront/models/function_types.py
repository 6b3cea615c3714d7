"""Function request and response type definitions."""

from typing import Optional, List, Dict, Any, TypedDict


class ImagePayload(TypedDict):
    """Base64 encoded image attached to a product request."""
    filename: str
    contentType: Optional[str]
    data: str


class SignupRequest(TypedDict):
    """Request structure for signup_callable."""
    email: str
    password: str
    role: str


class LoginRequest(TypedDict):
    """Request structure for login_callable."""
    email: str
    password: str


class AuthResponse(TypedDict):
    """Response structure for signup_callable and login_callable."""
    success: bool
    uid: str
    role: str
    landing: Optional[str]
    idToken: Optional[str]
    refreshToken: Optional[str]
    message: Optional[str]


class SessionRequest(TypedDict):
    """Request structure for get_session_callable."""
    page: Optional[str]


class SessionResponse(TypedDict):
    """Response structure for get_session_callable."""
    success: bool
    uid: Optional[str]
    email: Optional[str]
    role: str
    loading: bool
    decision: Optional[str]
    redirectTo: Optional[str]
    landing: Optional[str]


class AddProductRequest(TypedDict):
    """Request structure for add_product_callable."""
    product: Dict[str, Any]
    image: Optional[ImagePayload]


class UpdateProductRequest(TypedDict):
    """Request structure for update_product_callable."""
    productId: str
    updates: Dict[str, Any]
    image: Optional[ImagePayload]
    expectedUpdatedAt: Optional[str]


class DeleteProductRequest(TypedDict):
    """Request structure for delete_product_callable."""
    productId: str
    imageUrl: Optional[str]


class ToggleStatusRequest(TypedDict):
    """Request structure for toggle_product_status_callable."""
    productId: str
    currentStatus: str


class ProductResponse(TypedDict):
    """Response structure for product mutations."""
    success: bool
    productId: Optional[str]
    message: Optional[str]


class ListProductsResponse(TypedDict):
    """Response structure for list_products_callable."""
    success: bool
    products: List[Dict[str, Any]]
    stats: Dict[str, Any]


class ShopRequest(TypedDict):
    """Request structure for list_shop_products_callable."""
    category: Optional[str]
    search: Optional[str]


class ShopResponse(TypedDict):
    """Response structure for list_shop_products_callable."""
    success: bool
    products: List[Dict[str, Any]]
    featured: List[Dict[str, Any]]
    categories: List[str]


class UploadImageResponse(TypedDict):
    """Response structure for upload_product_image_callable."""
    success: bool
    imageUrl: str


class ListOrdersRequest(TypedDict):
    """Request structure for list_orders_callable."""
    status: Optional[str]


class ListOrdersResponse(TypedDict):
    """Response structure for the order callables."""
    success: bool
    orders: List[Dict[str, Any]]
    stats: Optional[Dict[str, Any]]


class CheckoutRequest(TypedDict):
    """Request structure for checkout_callable."""
    items: List[Dict[str, Any]]


class CheckoutResponse(TypedDict):
    """Response structure for checkout_callable."""
    success: bool
    subtotal: float
    tax: float
    total: float
    message: str
    checkoutUrl: str


class UpdateOrderStatusRequest(TypedDict):
    """Request structure for update_order_status_callable."""
    orderId: str
    status: str


class CancelOrderRequest(TypedDict):
    """Request structure for cancel_order_callable."""
    orderId: str


class OrderResponse(TypedDict):
    """Response structure for order status changes."""
    success: bool
    order: Dict[str, Any]
