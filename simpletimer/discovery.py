"""Shared namespace used by other components to discover the timer service.

A named container holding a named link is looked up in the namespace and
created if it is missing.
"""
from simpletimer.event import Signal

FOLDER_NAME = "SIMPLESIGNALS"
LINK_NAME = "TIMER"


class Container:
    """Named node that holds child containers and links"""

    def __init__(self, name):
        self.name = name
        self._children = {}

    def find_first_child(self, name):
        """Returns the child called name, or None"""
        return self._children.get(name, None)

    def add(self, child):
        """Attach child under its own name and return it"""
        self._children[child.name] = child
        return child

    def children(self):  # pylint: disable=missing-docstring
        return list(self._children.values())

    def __repr__(self):
        return "%s(\"%s\")" % (self.__class__.__name__, self.name)


class SharedNamespace(Container):
    """Root container that every component in the process can reach"""
    pass


class Link:
    """Discoverable endpoint. Subscribers receive whatever is fired on it."""

    def __init__(self, name):
        self.name = name
        self.signal = Signal(name)

    def connect(self, handler):  # pylint: disable=missing-docstring
        return self.signal.connect(handler)

    def disconnect(self, handler):  # pylint: disable=missing-docstring
        self.signal.disconnect(handler)

    def fire(self, *args):  # pylint: disable=missing-docstring
        self.signal.fire(*args)

    def __repr__(self):
        return "%s(\"%s\")" % (self.__class__.__name__, self.name)


SHARED_NAMESPACE = SharedNamespace("shared")


def find_or_create_link(namespace=None, folder_name=FOLDER_NAME, link_name=LINK_NAME):
    """Locate the link called link_name inside the container called folder_name,
    creating either when missing.

    Args:
        namespace (SharedNamespace): where to look. Default SHARED_NAMESPACE
        folder_name (str): container name.
        link_name (str): link name.
    Returns:
        Link
    """
    if namespace is None:
        namespace = SHARED_NAMESPACE

    folder = namespace.find_first_child(folder_name)
    if folder is None:
        folder = namespace.add(Container(folder_name))

    link = folder.find_first_child(link_name)
    if link is None:
        link = folder.add(Link(link_name))
    return link
