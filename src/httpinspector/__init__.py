"""
HTTP Inspector - command-line HTTP request inspection

Send GET/POST/PUT/DELETE requests with custom headers, query parameters,
JSON bodies and basic/bearer authentication, then inspect the status,
headers, timing and body of the response. Response bodies can be exported
to JSON or flattened CSV files.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.2.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
