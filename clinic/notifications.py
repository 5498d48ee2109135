# /clinic/notifications.py
"""Server-Sent-Events fan-out for the dashboard's live notifications.

Each open ``text/event-stream`` response owns a queue registered with a
channel's ``Broadcaster``. Publishing puts one formatted frame on every queue;
nothing is stored for clients that connect later.
"""
import json
import logging
import queue
import threading

logger = logging.getLogger(__name__)


def format_event(data, event=None):
    if not isinstance(data, str):
        data = json.dumps(data, default=str)
    lines = []
    if event:
        lines.append(f'event: {event}')
    lines.extend(f'data: {line}' for line in data.splitlines() or [''])
    return '\n'.join(lines) + '\n\n'


class Broadcaster:
    def __init__(self, name):
        self.name = name
        self._subscribers = []
        self._lock = threading.Lock()

    def subscribe(self):
        subscriber = queue.Queue()
        with self._lock:
            self._subscribers.append(subscriber)
        logger.info("Client connected to '%s' stream (%d open)", self.name, self.subscriber_count)
        return subscriber

    def unsubscribe(self, subscriber):
        with self._lock:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)
        logger.info("Client disconnected from '%s' stream", self.name)

    @property
    def subscriber_count(self):
        with self._lock:
            return len(self._subscribers)

    def publish(self, data, event=None):
        frame = format_event(data, event)
        with self._lock:
            subscribers = list(self._subscribers)
        for subscriber in subscribers:
            subscriber.put(frame)
        logger.debug("Sent '%s' event to %d client(s): %r", self.name, len(subscribers), frame)
        return len(subscribers)

    def stream(self, greeting=None, keepalive=15):
        """Yields SSE frames until the client goes away."""
        subscriber = self.subscribe()
        try:
            if greeting is not None:
                yield format_event(greeting)
            while True:
                try:
                    yield subscriber.get(timeout=keepalive)
                except queue.Empty:
                    yield ': keep-alive\n\n'
        finally:
            self.unsubscribe(subscriber)


general_channel = Broadcaster('general')
review_channel = Broadcaster('reviews')
contact_channel = Broadcaster('contacts')
