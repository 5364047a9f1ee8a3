"""
Quick demo script to try the strict JSON decoding endpoints.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting jparser demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Echo:          POST http://localhost:8000/echo")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/echo" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"message": "hello", "repeat": 2}\'')
    print()
    print("   Rejected bodies come back as 400 {\"error\": \"...\"}, e.g.")
    print('     -d \'{"message": "hello", "colour": "red"}\'')
    print('     -> {"error": "Request body contains unknown field \\"colour\\""}')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "jparser.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
