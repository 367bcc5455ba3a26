"""
Content API endpoint map.

Logical names map to either a fixed path or a function of an identifier.
"""

API_ENDPOINTS = {
    # Admin endpoints
    'ADMIN_LOGIN': '/api/admin/login',
    'ADMIN_ME': '/api/admin/me',

    # Projects endpoints
    'PROJECTS': '/api/projects',
    'PROJECT_BY_ID': lambda record_id: f'/api/projects/{record_id}',

    # Skills endpoints
    'SKILLS': '/api/skills',
    'SKILL_BY_ID': lambda record_id: f'/api/skills/{record_id}',

    # Experience endpoints
    'EXPERIENCE': '/api/experience',
    'EXPERIENCE_BY_ID': lambda record_id: f'/api/experience/{record_id}',

    # Contact endpoint
    'CONTACT': '/api/contact',

    # Upload endpoints
    'UPLOAD_IMAGE': '/api/upload/image',
    'DELETE_IMAGE': lambda filename: f'/api/upload/image/{filename}',
}

# resource name -> (collection endpoint, item endpoint)
RESOURCE_ENDPOINTS = {
    'projects': ('PROJECTS', 'PROJECT_BY_ID'),
    'skills': ('SKILLS', 'SKILL_BY_ID'),
    'experience': ('EXPERIENCE', 'EXPERIENCE_BY_ID'),
}


def resolve_endpoint(endpoint, *args):
    """Turn a logical endpoint name (or a raw path) into a path.

    Templated endpoints are called with ``args``; a raw path starting
    with ``/`` is returned as is.
    """
    if endpoint.startswith('/'):
        return endpoint

    try:
        target = API_ENDPOINTS[endpoint]
    except KeyError:
        raise ValueError(f"Unknown API endpoint: {endpoint}")

    if callable(target):
        if not args:
            raise ValueError(f"Endpoint {endpoint} requires an identifier")
        return target(*args)
    return target


def collection_path(resource):
    return resolve_endpoint(_resource_names(resource)[0])


def item_path(resource, record_id):
    return resolve_endpoint(_resource_names(resource)[1], record_id)


def _resource_names(resource):
    try:
        return RESOURCE_ENDPOINTS[resource]
    except KeyError:
        raise ValueError(f"Unknown resource: {resource}")
