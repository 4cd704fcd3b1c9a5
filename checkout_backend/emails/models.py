from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class OrderItem(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    quantity: int = Field(gt=0)
    price: Decimal = Field(ge=0)


class ShippingAddress(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = Field(default="", alias="zipCode")
    phone: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class OrderData(BaseModel):
    """Données de commande envoyées par le storefront (clés camelCase)."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    order_id: str = Field(alias="orderId", min_length=1)
    customer_name: str = Field(alias="customerName")
    # Le storefront historique envoie "orderItems"
    items: List[OrderItem] = Field(validation_alias=AliasChoices("items", "orderItems"))
    total_amount: Decimal = Field(alias="totalAmount")
    shipping_address: ShippingAddress = Field(alias="shippingAddress")
    payment_method: str = Field(alias="paymentMethod")
    order_date: datetime = Field(alias="orderDate")


class OrderEmailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to: Optional[str] = None
    subject: str = Field(min_length=1)
    order_data: OrderData = Field(alias="orderData")
    send_to_admin: bool = Field(default=False, alias="sendToAdmin")
