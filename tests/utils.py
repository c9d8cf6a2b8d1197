from typing import Any, Dict

HOT_BASE_URL = "http://localhost:5173"

sample_manifest: Dict[str, Dict[str, Any]] = {
    "resources/css/app.css": {
        "file": "assets/app-OH0OBLf7.css",
        "src": "resources/css/app.css",
        "isEntry": True,
    },
    "resources/js/app.js": {
        "file": "assets/app-XyZ123.js",
        "src": "resources/js/app.js",
        "isEntry": True,
        "css": ["assets/app-OH0OBLf7.css"],
    },
}
