import logging

from dotenv import load_dotenv

from flask import Flask, request, jsonify

load_dotenv()

from docs_content.db import get_default_adapter
from docs_content.errors import ContentNotFoundError
from docs_content.services import ContentService
from docs_content.utils.content_paths import split_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(service: ContentService | None = None) -> Flask:
    """Build the read-only content API. Without a service, serves the default database."""
    if service is None:
        db_adapter = get_default_adapter()
        db_adapter.create_tables()
        service = ContentService(db_adapter)

    app = Flask(__name__)

    @app.route("/")
    def hello_world() -> str:
        logger.debug("Health check request received.")
        return "Hello, World!"

    @app.route("/api/content/", defaults={"content_path": ""}, methods=["GET"])
    @app.route("/api/content/<path:content_path>", methods=["GET"])
    def get_content(content_path: str) -> tuple:
        """Resolve /<section>[/<category>[/<article>]] to its page payload."""
        try:
            logger.info("Content requested: /%s", content_path)
            return jsonify(service.get_content(content_path)), 200
        except ContentNotFoundError as e:
            logger.info("Content not found: /%s", content_path)
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.exception("get content failed.")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/sidebar", methods=["GET"])
    def get_sidebar() -> tuple:
        """
        Return the sidebar tree.

        Query params:
            path: resolve the navigation context from a content path, or
            sectionId / categoryId / articleId: give the context explicitly.
            Omit all for the landing view.
        """
        path = request.args.get("path")
        try:
            if path:
                logger.info("Sidebar requested for path=%s", path)
                return jsonify(service.get_sidebar_for_path(path)), 200
            sidebar = service.get_sidebar(
                section_id=request.args.get("sectionId") or None,
                category_id=request.args.get("categoryId") or None,
                article_id=request.args.get("articleId") or None,
            )
            return jsonify(sidebar), 200
        except ContentNotFoundError as e:
            logger.info("Sidebar context not found: %s", path)
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.exception("get sidebar failed.")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/articles/<string:article_id>/links", methods=["GET"])
    def get_article_links(article_id: str) -> tuple:
        """Return the previous and next published articles in the same section."""
        try:
            logger.info("Article links requested: %s", article_id)
            return jsonify(service.get_article_links(article_id)), 200
        except ContentNotFoundError as e:
            logger.info("Article not found: %s", article_id)
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.exception("get article links failed.")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/articles/<string:article_id>/headings", methods=["GET"])
    def get_article_headings(article_id: str) -> tuple:
        try:
            headings = service.get_article_headings(article_id)
            logger.debug("Returning %d headings for article_id=%s", len(headings), article_id)
            return jsonify({"articleId": article_id, "headings": headings}), 200
        except ContentNotFoundError as e:
            logger.info("Article not found: %s", article_id)
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.exception("get article headings failed.")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/paths", methods=["GET"])
    def list_paths() -> tuple:
        """Every routable path, plus its segments for route registration."""
        try:
            paths = service.list_paths()
            logger.debug("Returning %d paths", len(paths))
            return jsonify({
                "total": len(paths),
                "paths": paths,
                "params": [{"id": split_path(p)} for p in paths],
            }), 200
        except Exception as e:
            logger.exception("list paths failed.")
            return jsonify({"error": str(e)}), 500

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
