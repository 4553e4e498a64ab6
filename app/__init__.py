from flask import Flask, request, g
from dotenv import load_dotenv
from app.config import get_config_class
from app.logging import configure_logging
from app.errors import errors_bp
from app.cli import register_cli
from app.api import register_api_v1
from app.version import API_PREFIX
from app import metrics as app_metrics
from app.services.payments import init_payments
from flask_cors import CORS
from flasgger import Swagger
from prometheus_client import CollectorRegistry
from prometheus_flask_exporter import PrometheusMetrics
from flask_migrate import Migrate
import extensions
import os
import uuid
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from app.telemetry import init_tracing
from models import db


def _expose_header(existing, name):
    if name in existing:
        return existing
    return (existing + ("," if existing and not existing.endswith(",") else "") + name).strip(",")


def create_app(config_object=None):
    """Application factory."""
    load_dotenv()
    app = Flask(__name__)
    app.config.from_object(config_object or get_config_class())

    configure_logging(app)
    register_cli(app)

    # Initialize extensions
    limiter = extensions.limiter
    limiter.init_app(app)
    app.limiter = limiter

    Migrate(app, db, compare_type=True, render_as_batch=True)
    Swagger(
        app,
        config={
            "headers": [],
            "specs": [
                {
                    "endpoint": "apispec",
                    "route": "/apispec.json",
                    "rule_filter": lambda rule: rule.rule.startswith(
                        f"{API_PREFIX}/"
                    ),
                    "model_filter": lambda tag: True,
                }
            ],
            "static_url_path": "/flasgger_static",
            "swagger_ui": True,
            "specs_route": "/docs/",
        },
        template={
            "info": {"title": "Storefront API", "version": "1.0.0"},
            "tags": [
                {"name": "Catalog", "description": "Browsing and searching items"},
                {"name": "Orders", "description": "Guest checkout and order lifecycle"},
                {"name": "Admin", "description": "Catalog maintenance"},
            ],
        },
    )
    # A private registry keeps repeated test apps from re-registering the exporter metrics
    registry = CollectorRegistry() if app.config.get("TESTING") else None
    metrics = PrometheusMetrics(app, path="/metrics", registry=registry)
    if not app.config.get("TESTING") and not os.environ.get("METRICS_APP_INFO_SET"):
        metrics.info("app_info", "Application info", version="1.0.0")
        os.environ["METRICS_APP_INFO_SET"] = "1"

    # Configure CORS
    allowed = app.config.get("CORS_ALLOWED_ORIGINS", "*")
    if isinstance(allowed, str):
        allowed = allowed.strip()
        origins = "*" if allowed == "*" else [o.strip() for o in allowed.split(",") if o.strip()]
    else:
        origins = allowed or "*"
    CORS(
        app,
        origins=origins,
        expose_headers=["X-Request-ID", "traceparent"],
    )

    app.register_blueprint(errors_bp)
    if app.config.get("TESTING"):
        from app.test_support import test_support_bp
        app.register_blueprint(test_support_bp)
        app.register_blueprint(test_support_bp, url_prefix=f"{API_PREFIX}/test_support", name="test_support_bp_v1")

    register_api_v1(app)

    @app.before_request
    def _set_request_id():
        incoming = request.headers.get("X-Request-ID")
        rid = (incoming or uuid.uuid4().hex)[:100]
        g.request_id = rid
        app.logger.info(f"request start {request.method} {request.path}")

    @app.after_request
    def _add_request_id_header(resp):
        rid = getattr(g, "request_id", None)
        if rid:
            resp.headers["X-Request-ID"] = rid
        return resp

    @app.after_request
    def _set_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        existing = resp.headers.get("Access-Control-Expose-Headers", "")
        existing = _expose_header(existing, "X-Request-ID")
        existing = _expose_header(existing, "traceparent")
        resp.headers["Access-Control-Expose-Headers"] = existing
        return resp

    @app.after_request
    def _add_trace_header(resp):
        carrier = {}
        TraceContextTextMapPropagator().inject(carrier)
        tp = carrier.get("traceparent")
        if tp:
            resp.headers["traceparent"] = tp
        return resp

    db.init_app(app)
    app_metrics.init_app(app)
    init_payments(app)
    init_tracing(app)
    if app.config.get("DEBUG") or app.config.get("TESTING"):
        with app.app_context():
            db.create_all()
            app.logger.info("Tables created")

    @app.route("/health")
    def health():
        return {"status": "ok"}, 200

    return app
