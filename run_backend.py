#!/usr/bin/env python3
"""Start the Roof Facet Measurement API server."""

import logging
import os

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "roofmeasure.api.main:app",
        host=os.environ.get("ROOFMEASURE_HOST", "0.0.0.0"),
        port=int(os.environ.get("ROOFMEASURE_PORT", "8000")),
        reload=os.environ.get("ROOFMEASURE_RELOAD", "1") not in ("0", "false", "no"),
        reload_dirs=["roofmeasure"],
    )
