import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from config import Settings, get_settings, setup_logging
from database import Database
from errors import catch_async, register_error_handlers
from schemas import CampgroundIn, ReviewIn
from validation import campground_payload, review_payload

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_price(value) -> str:
    """Render a price exactly: whole numbers without a decimal point, no exponent notation."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


templates.env.filters["price"] = format_price

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """Let HTML forms send PUT/PATCH/DELETE as `POST ...?_method=DELETE`."""

    async def dispatch(self, request, call_next):
        if request.method == "POST":
            override = request.query_params.get("_method", "").upper()
            if override in OVERRIDABLE_METHODS:
                request.scope["method"] = override
        return await call_next(request)


# ------- Helpers -------

def get_db(request: Request) -> Database:
    return request.app.state.db


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=302)


def render(request: Request, name: str, **context) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context)


# ------- Routes -------
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return render(request, "home.html")


@router.get("/campgrounds", response_class=HTMLResponse)
@catch_async
def list_campgrounds(request: Request, db: Database = Depends(get_db)):
    campgrounds = db.list_campgrounds()
    return render(request, "campgrounds/index.html", campgrounds=campgrounds)


@router.get("/campgrounds/create", response_class=HTMLResponse)
def new_campground(request: Request):
    return render(request, "campgrounds/new.html")


@router.post("/campgrounds")
@catch_async
def create_campground(campground: CampgroundIn = Depends(campground_payload),
                      db: Database = Depends(get_db)):
    campground_id = db.create_campground(campground)
    return redirect(f"/campgrounds/{campground_id}")


@router.get("/campgrounds/{campground_id}", response_class=HTMLResponse)
@catch_async
def show_campground(request: Request, campground_id: str, db: Database = Depends(get_db)):
    camp = db.get_campground(campground_id, with_reviews=True)
    return render(request, "campgrounds/show.html", camp=camp)


@router.get("/campgrounds/{campground_id}/edit", response_class=HTMLResponse)
@catch_async
def edit_campground(request: Request, campground_id: str, db: Database = Depends(get_db)):
    camp = db.get_campground(campground_id)
    return render(request, "campgrounds/edit.html", camp=camp)


@router.put("/campgrounds/{campground_id}")
@catch_async
def update_campground(campground_id: str,
                      campground: CampgroundIn = Depends(campground_payload),
                      db: Database = Depends(get_db)):
    db.update_campground(campground_id, campground)
    return redirect(f"/campgrounds/{campground_id}")


@router.delete("/campgrounds/{campground_id}")
@catch_async
def delete_campground(campground_id: str, db: Database = Depends(get_db)):
    db.delete_campground(campground_id)
    return redirect("/campgrounds")


@router.post("/campgrounds/{campground_id}/reviews")
@catch_async
def create_review(campground_id: str,
                  review: ReviewIn = Depends(review_payload),
                  db: Database = Depends(get_db)):
    db.add_review(campground_id, review)
    return redirect(f"/campgrounds/{campground_id}")


@router.delete("/campgrounds/{campground_id}/reviews/{review_id}")
@catch_async
def delete_review(campground_id: str, review_id: str, db: Database = Depends(get_db)):
    db.delete_review(campground_id, review_id)
    return redirect(f"/campgrounds/{campground_id}")


@router.get("/health")
def health(db: Database = Depends(get_db)):
    response = {
        "backend": "running",
        "database": "not available",
        "database_name": None,
        "connection_status": "Not Connected",
        "collections": [],
    }
    if db is None:
        return response
    response["database_name"] = db.name
    try:
        db.ping()
        response["connection_status"] = "Connected"
        response["collections"] = db.collection_names()[:10]
        response["database"] = "connected"
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        response["database"] = f"error: {str(e)[:50]}"
    return response


# ------- App factory -------

def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.db is None
        if owned:
            app.state.db = Database.connect(settings.database_url, settings.database_name)
            logger.info("Database client created for %r", settings.database_name)
        yield
        if owned:
            app.state.db.close()
            app.state.db = None

    app = FastAPI(title="Yelp Camp", lifespan=lifespan)
    app.state.db = database
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MethodOverrideMiddleware)

    register_error_handlers(app, templates)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)
