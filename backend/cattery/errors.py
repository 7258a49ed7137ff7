from flask import jsonify
from werkzeug.exceptions import HTTPException
from cattery.domain.exceptions import CollectionError


def register_error_handlers(app):
    @app.errorhandler(CollectionError)
    def handle_collection_error(error):
        response = jsonify({
            "error": type(error).__name__,
            "message": error.message
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code
        return response
