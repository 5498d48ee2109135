from functools import wraps
from flask import request, current_app, make_response


def audit_log(action, resource):
    """Records the outcome of a back-office action in the audit log."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            ip_address = request.remote_addr
            resource_id = next(iter(kwargs.values()), None)

            try:
                # Use make_response to handle both Response objects and tuples.
                response = make_response(f(*args, **kwargs))
            except Exception as e:
                current_app.audit_logger.error(
                    f"Action='{action}', Resource='{resource}', ResourceID='{resource_id}', "
                    f"IP='{ip_address}', Success='False', Details='An error occurred: {e}'"
                )
                raise

            success = response.status_code < 400
            if success and response.is_json:
                # Missing records answer 200 with {"success": false}
                body = response.get_json(silent=True)
                success = not (isinstance(body, dict) and body.get('success') is False)
            current_app.audit_logger.info(
                f"Action='{action}', Resource='{resource}', ResourceID='{resource_id}', "
                f"IP='{ip_address}', Success='{success}', Details='Status: {response.status_code}'"
            )
            return response

        return decorated_function
    return decorator
