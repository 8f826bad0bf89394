from flask import Flask, render_template, request, redirect, url_for, flash

from weather_station.config import FLASK_SECRET_KEY
from weather_station.errors import FetchError
from weather_station.services import OpenWeatherService
from weather_station.utils.display import STYLE_CSS, description_style, temp_emoji

app = Flask(__name__)
# Needed for flashing messages (error handling)
app.secret_key = FLASK_SECRET_KEY


def get_service() -> OpenWeatherService:
    return OpenWeatherService()


@app.route("/", methods=["GET", "POST"])
def index():
    if request.method == "POST":
        city = request.form.get("city", "").strip()
        country_code = request.form.get("country_code", "").strip()
        if not city or not country_code:
            flash("Please enter both a city and a country code.", "error")
            return redirect(url_for("index"))

        try:
            app.logger.info("Fetching current weather for %s,%s...", city, country_code)
            record = get_service().get_current_weather(city, country_code)
        except FetchError as exc:
            flash(f"Data retrieval error: {exc}", "error")
            return redirect(url_for("index"))

        return render_template(
            "result.html",
            record=record,
            emoji=temp_emoji(record.temperature_c),
            style=STYLE_CSS[description_style(record.description)],
        )

    # GET request – just show the empty form
    return render_template("index.html")


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=True, host="0.0.0.0", port=5000)
