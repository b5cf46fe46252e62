from fastapi import APIRouter

from venuebook.api.routes import admin, auth, bookings, contact, public

api_router = APIRouter()

# 🔓 Public routes
api_router.include_router(public.router)
api_router.include_router(auth.router)
api_router.include_router(bookings.router)
api_router.include_router(contact.router)

# 🔒 Admin-only routes (guarded inside the router)
api_router.include_router(admin.router)
