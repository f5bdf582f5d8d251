from flask import Flask, request, jsonify, abort, current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.exceptions import HTTPException

from config import Config
from modules import monitor
from modules.category_classifier import classify_content
from modules.category_registry import CATEGORIES
from modules.keyword_extractor import extract_keywords
from modules.organizer import FileOrganizer
from modules.upload_handler import handle_file_uploads


def get_organizer():
    return current_app.extensions['file_organizer']


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    monitor.configure_logging(app.config['LOG_DIR'], app.config['LOG_LEVEL'])

    limiter = Limiter(
        get_remote_address,
        app=app,
        storage_uri=app.config['RATELIMIT_STORAGE_URI'],
        default_limits=app.config['DEFAULT_RATE_LIMITS'],
    )
    # Route decorators only hold a weak reference; the app owns the limiter
    app.extensions['rate_limiter'] = limiter

    app.extensions['file_organizer'] = FileOrganizer(
        top_n=app.config['TOP_KEYWORDS'],
        max_pdf_pages=app.config['MAX_PDF_PAGES'],
    )

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.route("/status")
    @limiter.exempt
    def health():
        state = get_organizer().processing_state()
        return jsonify({"status": "healthy", **state}), 200

    @app.route('/api/categories')
    def categories():
        return jsonify([
            {
                'name': category.name.value,
                'icon': category.icon,
                'color': category.color,
                'keyword_count': len(category.keywords),
            }
            for category in CATEGORIES
        ])

    @app.route('/api/files', methods=['POST'])
    @limiter.limit(lambda: current_app.config['UPLOAD_RATE_LIMIT'])
    def upload():
        uploaded_files = request.files.getlist('files')
        try:
            result = handle_file_uploads(uploaded_files, get_organizer(), app.config)
        except ValueError as ve:
            abort(400, description=str(ve))

        processed = result['processed']
        status = 201 if processed else 422
        return jsonify({
            'processed': [f.to_dict() for f in processed],
            'failed': result['failed'],
            'rejected': result['rejected'],
        }), status

    @app.route('/api/files', methods=['GET'])
    def list_files():
        organizer = get_organizer()
        if 'category' in request.args:
            try:
                organizer.set_selected_category(request.args.get('category') or None)
            except ValueError as ve:
                abort(400, description=str(ve))
        if 'q' in request.args:
            organizer.set_search_query(request.args.get('q'))

        return jsonify({
            'selected_category': organizer.selected_category.value if organizer.selected_category else None,
            'search_query': organizer.search_query,
            'files': [f.to_dict() for f in organizer.filtered_files()],
        })

    @app.route('/api/files/<file_id>', methods=['GET'])
    def file_preview(file_id):
        organized = get_organizer().get_file(file_id)
        if organized is None:
            abort(404, description=f"File {file_id} not found.")
        return jsonify(organized.preview(app.config['PREVIEW_CHARS']))

    @app.route('/api/files/<file_id>', methods=['DELETE'])
    def remove_file(file_id):
        if not get_organizer().remove_file(file_id):
            abort(404, description=f"File {file_id} not found.")
        return jsonify({'removed': file_id})

    @app.route('/api/folders')
    def folders():
        return jsonify([
            {
                'name': folder['name'],
                'icon': folder['icon'],
                'color': folder['color'],
                'files': [f.to_dict() for f in folder['files']],
            }
            for folder in get_organizer().folders()
        ])

    @app.route('/api/stats')
    def stats():
        return jsonify(get_organizer().stats())

    @app.route('/api/categorize', methods=['POST'])
    def categorize():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or not isinstance(payload.get('text'), str):
            abort(400, description="JSON body with a 'text' string is required.")

        top_n = payload.get('top_n', app.config['TOP_KEYWORDS'])
        if not isinstance(top_n, int) or isinstance(top_n, bool) or top_n < 0:
            abort(400, description="'top_n' must be a non-negative integer.")

        keywords = extract_keywords(payload['text'], top_n)
        result = classify_content(payload['text'], keywords)
        return jsonify({
            'keywords': keywords,
            'category': result.category.value,
            'score': result.score,
        })

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)
