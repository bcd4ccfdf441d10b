from flask import Flask, jsonify, request

from passcraft.analyzer import analyze, is_common_password
from passcraft.crack_time import crack_time
from passcraft.errors import ConfigurationError
from passcraft.evaluator import evaluate, summarize
from passcraft.generator import generate, generate_pin
from passcraft.scorer import score
from passcraft.vocabulary import generate_passphrase

# length ranges offered by the generator screens
PASSWORD_LENGTH = (4, 128)
WORDS_LENGTH = (3, 20)
PIN_LENGTH = (3, 12)

app = Flask(__name__)

# PasscraftError is a ValueError
@app.errorhandler(ValueError)
def handle_bad_request(e):
    return jsonify({"error": str(e)}), 400

def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def _int_field(data, key, default, bounds):
    value = data.get(key, default)
    # bool is an int subclass; JSON true/false is not a length
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be an integer")
    low, high = bounds
    if not low <= value <= high:
        raise ConfigurationError(f"'{key}' must be between {low} and {high}")
    return value

def _bool_field(data, key, default):
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be true or false")
    return value

def _str_field(data, key, default):
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ConfigurationError(f"'{key}' must be a string")
    return value

@app.route('/')
def home():
    return jsonify({
        "message": "passcraft API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = _body()
    password = generate(
        length=_int_field(data, 'length', 20, PASSWORD_LENGTH),
        use_upper=_bool_field(data, 'uppercase', True),
        use_lower=_bool_field(data, 'lowercase', True),
        use_digits=_bool_field(data, 'numbers', True),
        use_symbols=_bool_field(data, 'symbols', False),
        use_spaces=_bool_field(data, 'spaces', False),
        exclude_similar=_bool_field(data, 'exclude_similar', False),
        strict=_bool_field(data, 'strict', True),
    )
    result = {'password': password}
    result.update(summarize(password))
    return jsonify(result)

@app.route('/pin', methods=['POST'])
def pin_route():
    data = _body()
    return jsonify({'pin': generate_pin(_int_field(data, 'length', 6, PIN_LENGTH))})

@app.route('/words', methods=['POST'])
def words_route():
    data = _body()
    passphrase = generate_passphrase(
        count=_int_field(data, 'length', 4, WORDS_LENGTH),
        full_words=_bool_field(data, 'full_words', True),
        separator=_str_field(data, 'separator', '-'),
        capitalize=_bool_field(data, 'capitalize', False),
        uppercase=_bool_field(data, 'uppercase', False),
    )
    return jsonify({'password': passphrase})

@app.route('/analyze', methods=['POST'])
def analyze_route():
    return jsonify(evaluate(_str_field(_body(), 'password', '')))

@app.route('/score', methods=['POST'])
def score_route():
    return jsonify({'score': score(analyze(_str_field(_body(), 'password', '')))})

@app.route('/crack-times', methods=['POST'])
def crack_times_route():
    return jsonify({'crack_times': crack_time(_str_field(_body(), 'password', ''))})

@app.route('/common', methods=['POST'])
def common_route():
    return jsonify({'is_common': is_common_password(_str_field(_body(), 'password', ''))})

if __name__ == "__main__":
    app.run(debug=True)
