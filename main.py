from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from overseas.core.config import settings
from overseas.core.logging import configure_logging
from overseas.endpoints import (
    admin, appointments, auth, consultation_inquiry, content, course, events, learn, practice_tests, webhooks,
)
from overseas.middleware.exceptions import global_exception_handler, http_exception_handler, validation_exception_handler
from overseas.middleware.logging import RequestLoggingMiddleware
from overseas.models import registry  # noqa: F401  registers every mapper

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

api = settings.API_PREFIX

app.include_router(auth.router, prefix=f"{api}/auth", tags=["Auth"])
app.include_router(course.router, prefix=f"{api}/courses", tags=["Courses"])
app.include_router(learn.router, prefix=f"{api}/courses", tags=["Learning"])
app.include_router(webhooks.router, prefix=f"{api}/payments/webhooks", tags=["Webhooks"])
app.include_router(events.router, prefix=f"{api}/events", tags=["Events"])
app.include_router(appointments.router, prefix=f"{api}/appointments", tags=["Appointments"])
app.include_router(consultation_inquiry.router, prefix=f"{api}/consultation-inquiries", tags=["Consultation Inquiries"])
app.include_router(admin.router, prefix=f"{api}/admin", tags=["Admin"])
app.include_router(practice_tests.router, prefix=f"{api}/admin/tests", tags=["Admin Tests"])

for public_router, admin_router in content.CONTENT_ROUTERS:
    app.include_router(public_router, prefix=f"{api}/content", tags=["Content"])
    app.include_router(admin_router, prefix=f"{api}/admin/content", tags=["Admin Content"])


@app.get(f"{api}/health", tags=["utility"])
def health_check():
    return {"status": "ok", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
