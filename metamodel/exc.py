class Error(Exception):

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class APIError(Error):

    def __init__(self, message, resource, status=400):
        super().__init__(message)
        self.resource = resource
        self.status = status

    def __str__(self):
        return '[{}] {}'.format(self.resource, self.message)


class NotFound(APIError):

    def __init__(self, resource):
        super().__init__('resource not registered: {}'.format(resource), resource, 404)
