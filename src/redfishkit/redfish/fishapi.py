import json
import logging

import requests

from redfishkit.common.errors import TransportError

LOG = logging.getLogger(__name__)

SESSIONS_ENDPOINT = '/redfish/v1/SessionService/Sessions'


class RedfishAPI:
    """
    Redfish API client for interacting with the Redfish service.

    Every request raises TransportError when the service cannot be reached
    or answers with an HTTP error status. The underlying requests.Session
    is shared by all threads fetching through this client.
    """
    def __init__(self, ip, user, password, verify_ssl=True, timeout=30, max_workers=None):
        self.ip = ip
        self.user = user
        self.password = password
        self.base_url = f"https://{ip}"
        self.timeout = timeout
        # Thread pool size used when fetching collections; None lets the executor decide.
        self.max_workers = max_workers
        self.session_uri = None
        self.session = requests.Session()
        self.session.auth = (user, password)
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'OData-Version': '4.0'
        })
        self.verify_ssl = verify_ssl

        if not self.verify_ssl:
            self.disable_ssl_verification()

        # Try to establish a Redfish session
        self._establish_session()


    def __enter__(self):
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.logout()


    def disable_ssl_verification(self):
        self.verify_ssl = False
        requests.packages.urllib3.disable_warnings(requests.packages.urllib3.exceptions.InsecureRequestWarning)


    def _send(self, method, endpoint, **kwargs):
        url = self.base_url + endpoint
        LOG.debug('%s %s', method.upper(), url)
        try:
            response = getattr(self.session, method)(url, verify=self.verify_ssl, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f'{method.upper()} {endpoint} failed: {e}') from e
        if response.status_code >= 400:
            raise TransportError.from_response(method, endpoint, response)
        return response


    def get(self, endpoint, params=None):
        return self._send('get', endpoint, params=params)


    def post(self, endpoint, data=None):
        if data is not None:
            data = json.dumps(data)
        return self._send('post', endpoint, data=data)


    def put(self, endpoint, data=None):
        if data is not None:
            data = json.dumps(data)
        return self._send('put', endpoint, data=data)


    def patch(self, endpoint, data=None, headers=None):
        if data is not None:
            data = json.dumps(data)
        return self._send('patch', endpoint, data=data, headers=headers)


    def delete(self, endpoint):
        return self._send('delete', endpoint)


    def _establish_session(self):
        """Attempt to create a Redfish session, keeping basic auth if that fails."""
        payload = {
            "UserName": self.user,
            "Password": self.password
        }
        try:
            response = self.session.post(
                self.base_url + SESSIONS_ENDPOINT,
                json=payload,
                verify=self.verify_ssl,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            LOG.debug('Session creation failed, using basic auth: %s', e)
            return

        if response.status_code == 201:
            auth_token = response.headers.get('X-Auth-Token')
            if auth_token:
                self.session.headers.update({'X-Auth-Token': auth_token})
                # Remove basic auth since we have a token
                self.session.auth = None
                self.session_uri = response.headers.get('Location')
                LOG.debug('Redfish session established: %s', self.session_uri)
        else:
            LOG.debug('Session creation returned %s, using basic auth', response.status_code)


    def logout(self):
        """Delete the Redfish session, if one was created."""
        if not self.session_uri:
            return
        endpoint = self.session_uri
        if endpoint.startswith(self.base_url):
            endpoint = endpoint[len(self.base_url):]
        try:
            self.delete(endpoint)
        finally:
            self.session_uri = None
            self.session.headers.pop('X-Auth-Token', None)
            self.session.auth = (self.user, self.password)
