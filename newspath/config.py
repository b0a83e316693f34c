import orthauth as oa
from newspath import exceptions as exc
from newspath.url import Scheme

auth = oa.configure_here('auth-config.py', __name__)

# secure variants keep their own well known port
_port_variables = {
    Scheme.NEWS: 'nntp-port',
    Scheme.SNEWS: 'snews-port',
}


def default_user():
    return auth.get('nntp-user')


def default_port(scheme):
    """ port implied by the configuration for addresses of scheme
        that do not state one, None if nothing is configured """
    if scheme not in _port_variables:
        return None

    variable = _port_variables[scheme]
    port = auth.get(variable)
    if port is None:
        return None

    try:
        return int(port)
    except ValueError as e:
        msg = f'{variable} is not a port number {port!r}'
        raise exc.ConfigurationError(msg) from e


def folder():
    return auth.get('news-folder')
