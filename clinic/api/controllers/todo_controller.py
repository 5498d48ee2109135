from flask import jsonify, current_app
from clinic.extensions import db
from clinic.models import Todo
from clinic.utils.forms import get_payload


def create_todo():
    text = get_payload().get('text')
    if not text:
        return jsonify({'error': 'Text is required'}), 400

    todo = Todo(text=text)
    db.session.add(todo)
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating todo: {e}")
        return jsonify({'error': 'Failed to create todo item'}), 500

    return jsonify(todo.to_dict()), 201


def toggle_todo(todo_id):
    todo = db.session.get(Todo, todo_id)
    if not todo:
        return jsonify({'error': 'Todo not found'}), 404

    todo.done = not todo.done
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating todo {todo_id}: {e}")
        return jsonify({'error': 'Failed to update todo item'}), 500

    return jsonify(todo.to_dict()), 200


def delete_todo(todo_id):
    try:
        Todo.query.filter_by(id=todo_id).delete()
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting todo {todo_id}: {e}")
        return jsonify({'error': 'Failed to delete todo item'}), 500

    return '', 204
