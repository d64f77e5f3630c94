import importlib
import time
import uuid

import pytest
import zmq

import kernelwire
from kernelwire import config
from kernelwire.protocol import fields


class RecordingSocket:
    """ Stand-in for a zmq socket. Frames are appended one at a time to a
        shared list, with a thread switch between each, so that concurrent
        writers that are not serialized visibly interleave.
    """

    def __init__(self, wire=None):
        if wire is None:
            wire = list()
        self.wire = wire
        self.sent = list()

    def send_multipart(self, frames):
        frames = list(frames)
        for frame in frames:
            self.wire.append(frame)
            time.sleep(0)
        self.sent.append(frames)

    def close(self, linger=None):
        self.closed = True


@pytest.fixture(params=config.json_backends)
def json_backend(request, monkeypatch):
    """ Reload the JSON wrapper pinned to each backend in turn, restoring
        the automatic choice afterwards. Backends that are not installed
        are skipped.
    """

    backend = request.param
    if backend != 'json':
        pytest.importorskip(backend)

    monkeypatch.setenv(config.json_variable, backend)
    importlib.reload(kernelwire.json)

    yield backend

    monkeypatch.undo()
    importlib.reload(kernelwire.json)


@pytest.fixture
def socket_factory():
    return RecordingSocket


@pytest.fixture
def key():
    return b'secret'


@pytest.fixture
def request_message():
    header = kernelwire.Header(msg_id='1', username='u', session='s', msg_type=fields.EXECUTE_REQUEST)
    return kernelwire.Message(header=header, content={'code': '1+1'})


@pytest.fixture
def recording_socket():
    return RecordingSocket()


@pytest.fixture
def socket_group(key, recording_socket):
    iopub = RecordingSocket()
    return kernelwire.ZmqSocketGroup(key, shell=recording_socket, iopub=iopub)


@pytest.fixture
def zmq_pair():
    """ A bound ROUTER socket standing in for a kernel shell channel, and a
        connected DEALER standing in for a front-end.
    """

    context = zmq.Context.instance()
    address = 'inproc://kernelwire-test-%s' % (uuid.uuid4().hex)

    router = context.socket(zmq.ROUTER)
    router.setsockopt(zmq.LINGER, 0)
    router.bind(address)

    dealer = context.socket(zmq.DEALER)
    dealer.setsockopt(zmq.LINGER, 0)
    dealer.identity = b'frontend'
    dealer.connect(address)

    yield router, dealer

    dealer.close()
    router.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
