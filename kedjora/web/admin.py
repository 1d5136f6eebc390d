"""Admin pages. Each one is rendered through AdminShell, never directly."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from sqlalchemy import func
from sqlalchemy.orm import Session
from starlette.responses import Response

from kedjora.core.database import get_db
from kedjora.core.sessions import SessionToken
from kedjora.models import Order, OrderStatus, PageContent, Portfolio, Service, Testimonial
from kedjora.services.content import get_or_404
from kedjora.services.pages import get_section
from kedjora.web import templates
from kedjora.web.forms import EDITABLE_RESOURCES, SETTINGS_SECTIONS, EditableResource, initial_values
from kedjora.web.shell import AdminShell

router = APIRouter()

NAV_ITEMS = [
    ("Dashboard", "/admin"),
    ("Services", "/admin/services"),
    ("Portfolio", "/admin/portfolio"),
    ("Testimonials", "/admin/testimonials"),
    ("Orders", "/admin/orders"),
    ("Settings", "/admin/settings"),
]


def build_shell(request: Request) -> AdminShell:
    """Shell whose resolver re-reads the session cookie for this request."""
    codec = request.app.state.session_codec

    async def resolve_session() -> SessionToken | None:
        return codec.read(request.cookies)

    def render_loading() -> Response:
        return templates.TemplateResponse(request, "admin/loading.html", {})

    return AdminShell(resolve_session, str(request.url), render_loading)


def _render(request: Request, session: SessionToken, template: str, context: dict) -> Response:
    settings = request.app.state.settings
    return templates.TemplateResponse(
        request,
        template,
        {
            "site_name": settings.SITE_NAME,
            "api_prefix": settings.API_PREFIX,
            "nav_items": NAV_ITEMS,
            "current_path": request.url.path,
            "user": session,
            **context,
        },
    )


async def _admin_page(request: Request, build: Callable[[SessionToken], Response]) -> Response:
    shell = build_shell(request)
    await shell.mount()
    # Page builders query the database synchronously; keep them off the event loop.
    return await run_in_threadpool(shell.render, build)


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


@router.get("", response_class=HTMLResponse)
async def dashboard(request: Request, db: Annotated[Session, Depends(get_db)]) -> Response:
    def build(session: SessionToken) -> Response:
        stats = [
            ("Services", db.query(func.count(Service.id)).scalar()),
            ("Portfolio items", db.query(func.count(Portfolio.id)).scalar()),
            ("Testimonials", db.query(func.count(Testimonial.id)).scalar()),
            (
                "Pending orders",
                db.query(func.count(Order.id))
                .filter(Order.status == OrderStatus.PENDING.value)
                .scalar(),
            ),
        ]
        return _render(request, session, "admin/dashboard.html", {"title": "Dashboard", "stats": stats})

    return await _admin_page(request, build)


@router.get("/services", response_class=HTMLResponse)
async def services_page(request: Request, db: Annotated[Session, Depends(get_db)]) -> Response:
    def build(session: SessionToken) -> Response:
        services = db.query(Service).order_by(Service.created_at.desc(), Service.id.desc()).all()
        rows = [
            [s.title, s.slug, s.price or "-", _yes_no(s.is_popular), _yes_no(s.is_active)]
            for s in services
        ]
        return _render(
            request,
            session,
            "admin/table.html",
            {
                "title": "Services",
                "columns": ["Title", "Slug", "Price", "Popular", "Active"],
                "rows": rows,
                "links": [f"/admin/services/{s.id}/edit" for s in services],
                "new_url": "/admin/services/new",
            },
        )

    return await _admin_page(request, build)


@router.get("/portfolio", response_class=HTMLResponse)
async def portfolio_page(request: Request, db: Annotated[Session, Depends(get_db)]) -> Response:
    def build(session: SessionToken) -> Response:
        items = db.query(Portfolio).order_by(Portfolio.created_at.desc(), Portfolio.id.desc()).all()
        rows = [
            [p.title, p.slug, p.client_name or "-", p.service_type, _yes_no(p.featured)]
            for p in items
        ]
        return _render(
            request,
            session,
            "admin/table.html",
            {
                "title": "Portfolio",
                "columns": ["Title", "Slug", "Client", "Service type", "Featured"],
                "rows": rows,
                "links": [f"/admin/portfolio/{p.id}/edit" for p in items],
                "new_url": "/admin/portfolio/new",
            },
        )

    return await _admin_page(request, build)


@router.get("/testimonials", response_class=HTMLResponse)
async def testimonials_page(request: Request, db: Annotated[Session, Depends(get_db)]) -> Response:
    def build(session: SessionToken) -> Response:
        items = db.query(Testimonial).order_by(Testimonial.created_at.desc(), Testimonial.id.desc()).all()
        rows = [
            [t.name, t.company or "-", str(t.rating), _yes_no(t.featured)]
            for t in items
        ]
        return _render(
            request,
            session,
            "admin/table.html",
            {
                "title": "Testimonials",
                "columns": ["Name", "Company", "Rating", "Featured"],
                "rows": rows,
                "links": [f"/admin/testimonials/{t.id}/edit" for t in items],
                "new_url": "/admin/testimonials/new",
            },
        )

    return await _admin_page(request, build)


@router.get("/orders", response_class=HTMLResponse)
async def orders_page(request: Request, db: Annotated[Session, Depends(get_db)]) -> Response:
    def build(session: SessionToken) -> Response:
        orders = db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()
        rows = [
            [
                o.name,
                o.email,
                o.service.title if o.service else "-",
                o.status,
                o.created_at.strftime("%Y-%m-%d %H:%M"),
            ]
            for o in orders
        ]
        links = [f"/admin/orders/{o.id}" for o in orders]
        return _render(
            request,
            session,
            "admin/table.html",
            {
                "title": "Orders",
                "columns": ["Name", "Email", "Service", "Status", "Received"],
                "rows": rows,
                "links": links,
            },
        )

    return await _admin_page(request, build)


@router.get("/orders/{order_id}", response_class=HTMLResponse)
async def order_detail_page(
    order_id: int,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    def build(session: SessionToken) -> Response:
        order = db.get(Order, order_id)
        if order is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
        return _render(
            request,
            session,
            "admin/order.html",
            {
                "title": f"Order #{order.id}",
                "order": order,
                "statuses": [s.value for s in OrderStatus],
            },
        )

    return await _admin_page(request, build)


@router.get("/settings", response_class=HTMLResponse)
async def settings_page(request: Request, db: Annotated[Session, Depends(get_db)]) -> Response:
    def build(session: SessionToken) -> Response:
        stored = {c.section: c for c in db.query(PageContent).all()}
        rows = []
        for section, (heading, _fields) in SETTINGS_SECTIONS.items():
            content = stored.get(section)
            rows.append(
                [
                    heading,
                    (content.title if content else None) or "-",
                    (content.subtitle if content else None) or "-",
                ]
            )
        return _render(
            request,
            session,
            "admin/table.html",
            {
                "title": "Page settings",
                "columns": ["Section", "Title", "Subtitle"],
                "rows": rows,
                "links": [f"/admin/settings/{section}" for section in SETTINGS_SECTIONS],
            },
        )

    return await _admin_page(request, build)


@router.get("/settings/{section}", response_class=HTMLResponse)
async def settings_form_page(
    section: str,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    def build(session: SessionToken) -> Response:
        if section not in SETTINGS_SECTIONS:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Section not found")
        heading, fields = SETTINGS_SECTIONS[section]
        prefix = request.app.state.settings.API_PREFIX
        return _render(
            request,
            session,
            "admin/form.html",
            {
                "title": heading,
                "fields": fields,
                "values": initial_values(fields, get_section(db, section)),
                "hidden_fields": {"section": section},
                "method": "POST",
                "api_url": f"{prefix}/settings",
                "next_url": "/admin/settings",
                "submit_label": "Save",
            },
        )

    return await _admin_page(request, build)


def _register_editor(resource: EditableResource) -> None:
    """New, edit and delete-confirmation pages for one resource."""

    async def new_item(request: Request) -> Response:
        def build(session: SessionToken) -> Response:
            prefix = request.app.state.settings.API_PREFIX
            return _render(
                request,
                session,
                "admin/form.html",
                {
                    "title": f"New {resource.label.lower()}",
                    "fields": resource.fields,
                    "values": initial_values(resource.fields),
                    "hidden_fields": {},
                    "method": "POST",
                    "api_url": f"{prefix}{resource.api_path}",
                    "next_url": resource.admin_path,
                    "submit_label": "Create",
                },
            )

        return await _admin_page(request, build)

    async def edit_item(
        item_id: int,
        request: Request,
        db: Annotated[Session, Depends(get_db)],
    ) -> Response:
        def build(session: SessionToken) -> Response:
            item = get_or_404(db, resource.model, item_id, resource.label)
            prefix = request.app.state.settings.API_PREFIX
            return _render(
                request,
                session,
                "admin/form.html",
                {
                    "title": f"Edit {resource.label.lower()}",
                    "fields": resource.fields,
                    "values": initial_values(resource.fields, item),
                    "hidden_fields": {},
                    "method": "PATCH",
                    "api_url": f"{prefix}{resource.api_path}/{item_id}",
                    "next_url": resource.admin_path,
                    "delete_url": f"{resource.admin_path}/{item_id}/delete",
                    "submit_label": "Save",
                },
            )

        return await _admin_page(request, build)

    async def delete_item(
        item_id: int,
        request: Request,
        db: Annotated[Session, Depends(get_db)],
    ) -> Response:
        def build(session: SessionToken) -> Response:
            item = get_or_404(db, resource.model, item_id, resource.label)
            prefix = request.app.state.settings.API_PREFIX
            return _render(
                request,
                session,
                "admin/confirm_delete.html",
                {
                    "title": f"Delete {resource.label.lower()}",
                    "item_label": getattr(item, resource.title_attr),
                    "api_url": f"{prefix}{resource.api_path}/{item_id}",
                    "next_url": resource.admin_path,
                    "cancel_url": f"{resource.admin_path}/{item_id}/edit",
                },
            )

        return await _admin_page(request, build)

    router.add_api_route(
        f"/{resource.path}/new", new_item, methods=["GET"], response_class=HTMLResponse,
        name=f"{resource.path}_new",
    )
    router.add_api_route(
        f"/{resource.path}/{{item_id}}/edit", edit_item, methods=["GET"], response_class=HTMLResponse,
        name=f"{resource.path}_edit",
    )
    router.add_api_route(
        f"/{resource.path}/{{item_id}}/delete", delete_item, methods=["GET"], response_class=HTMLResponse,
        name=f"{resource.path}_delete",
    )


for _resource in EDITABLE_RESOURCES:
    _register_editor(_resource)
