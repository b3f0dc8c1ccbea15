# backend/gateway/gateway_router.py
from fastapi import APIRouter

from routers.auth_router import router as auth_router
from routers.users_router import router as users_router
from routers.restaurants_router import router as restaurants_router
from routers.orders_router import router as orders_router
from routers.payment_methods_router import router as payment_methods_router

gateway_router = APIRouter()

gateway_router.include_router(auth_router)              # /auth/...
gateway_router.include_router(users_router)             # /users/...
gateway_router.include_router(restaurants_router)       # /restaurants/...
gateway_router.include_router(orders_router)            # /orders/...
gateway_router.include_router(payment_methods_router)   # /payment-methods/...
