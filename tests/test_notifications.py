from clinic.notifications import Broadcaster, format_event


def test_format_event():
    assert format_event('hello') == 'data: hello\n\n'
    assert format_event({'a': 1}, event='review') == 'event: review\ndata: {"a": 1}\n\n'
    assert format_event('two\nlines') == 'data: two\ndata: lines\n\n'


def test_publish_reaches_every_subscriber():
    channel = Broadcaster('test')
    first, second = channel.subscribe(), channel.subscribe()

    assert channel.publish({'count': 3}, event='count') == 2
    assert first.get_nowait() == 'event: count\ndata: {"count": 3}\n\n'
    assert second.get_nowait() == 'event: count\ndata: {"count": 3}\n\n'

    channel.unsubscribe(first)
    assert channel.publish('later') == 1
    assert first.empty()


def test_publish_without_subscribers():
    assert Broadcaster('empty').publish('nobody listens') == 0


def test_stream_yields_greeting_events_and_keepalive():
    channel = Broadcaster('stream')
    stream = channel.stream(greeting='hi', keepalive=0.01)

    assert next(stream) == 'data: hi\n\n'
    assert channel.subscriber_count == 1

    channel.publish('news')
    assert next(stream) == 'data: news\n\n'
    assert next(stream) == ': keep-alive\n\n'

    stream.close()
    assert channel.subscriber_count == 0


def test_general_stream_endpoint(client):
    response = client.get('/sse', buffered=False)

    assert response.status_code == 200
    assert response.mimetype == 'text/event-stream'
    assert response.headers['Cache-Control'] == 'no-cache'

    chunk = next(iter(response.response))
    if isinstance(chunk, bytes):
        chunk = chunk.decode()
    assert chunk == 'data: Welcome to the SSE endpoint\n\n'
    response.close()
