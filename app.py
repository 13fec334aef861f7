from academic_portal import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=3001, debug=app.config["DEBUG"])
