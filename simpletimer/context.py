"""Execution contexts allowed to create timers.

A context check is any callable taking no arguments that returns True when
the caller may create timers.
"""

SERVER = "server"
CLIENT = "client"
ROLES = (SERVER, CLIENT)


def server_context():
    """Context check of the authoritative process"""
    return True


def client_context():
    """Context check of a display process, which never creates timers"""
    return False


def context_for_role(role):
    """Returns the context check for role, one of ROLES"""
    if role == SERVER:
        return server_context
    if role == CLIENT:
        return client_context
    raise ValueError("unknown role %r, expected one of %s" % (role, ", ".join(ROLES)))
