from . import create_app

app = create_app()

if __name__ == "__main__":
    # threaded so a long OCR run does not hold up other requests
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=True)
