from __future__ import annotations

from fastapi import APIRouter

from courtbook.api.routes import admin_blocks, admin_rules, admin_settings, admin_users, bookings, grid, me

api_router = APIRouter()

api_router.include_router(grid.router, prefix="/grid", tags=["grid"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(me.router, prefix="/me", tags=["me"])

# Admin
api_router.include_router(admin_rules.router, prefix="/admin/weekly-blocks", tags=["admin-weekly-blocks"])
api_router.include_router(admin_blocks.router, prefix="/admin/manual-blocks", tags=["admin-manual-blocks"])
api_router.include_router(admin_settings.router, prefix="/admin/settings", tags=["admin-settings"])
api_router.include_router(admin_users.router, prefix="/admin/users", tags=["admin-users"])
