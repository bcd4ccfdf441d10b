"""
passcraft.common_passwords
Frequently leaked passwords. Membership is case-sensitive.
"""

COMMON_PASSWORDS = frozenset((
    "123456", "password", "12345678", "qwerty", "123456789", "12345", "1234",
    "111111", "1234567", "dragon", "123123", "baseball", "abc123", "football",
    "monkey", "letmein", "696969", "shadow", "master", "666666", "qwertyuiop",
    "123321", "mustang", "1234567890", "michael", "654321", "superman",
    "1qaz2wsx", "7777777", "121212", "000000", "qazwsx", "123qwe", "killer",
    "trustno1", "jordan", "jennifer", "zxcvbnm", "asdfgh", "hunter", "buster",
    "soccer", "harley", "batman", "andrew", "tigger", "sunshine", "iloveyou",
    "2000", "charlie", "robert", "thomas", "hockey", "ranger", "daniel",
    "starwars", "klaster", "112233", "george", "computer", "michelle",
    "jessica", "pepper", "1111", "zxcvbn", "555555", "11111111", "131313",
    "freedom", "777777", "pass", "maggie", "159753", "aaaaaa", "ginger",
    "princess", "joshua", "cheese", "amanda", "summer", "love", "ashley",
    "nicole", "chelsea", "biteme", "matthew", "access", "yankees", "987654321",
    "dallas", "austin", "thunder", "taylor", "matrix", "mobilemail", "mom",
    "monitor", "monitoring", "montana", "moon", "moscow", "password1",
    "password123", "Password", "Password1", "Password123", "P@ssw0rd",
    "p@ssw0rd", "passw0rd", "admin", "admin123", "administrator", "root",
    "toor", "guest", "welcome", "welcome1", "welcome123", "login", "changeme",
    "secret", "letmein1", "qwerty123", "qwerty1", "1q2w3e4r", "1q2w3e",
    "1q2w3e4r5t", "zaq12wsx", "qazwsx123", "abcd1234", "abc12345", "a123456",
    "123abc", "12341234", "1234qwer", "123456a", "123456789a", "1234567891",
    "12345678910", "0987654321", "987654", "9876543210", "222222", "333333",
    "444444", "888888", "999999", "101010", "112233445566", "123654",
    "147258369", "147258", "159357", "246810", "314159", "369369", "420420",
    "5201314", "789456", "789456123", "88888888", "00000000", "11223344",
    "1111111", "123123123", "iloveyou1", "iloveu", "lovely", "loveme",
    "princess1", "sunshine1", "football1", "baseball1", "basketball",
    "soccer1", "hockey1", "dragon1", "monkey1", "shadow1", "master1",
    "superman1", "batman1", "michael1", "jordan23", "charlie1", "hunter2",
    "hunter1", "buster1", "tigger1", "ashley1", "jessica1", "jennifer1",
    "nicole1", "daniel1", "andrew1", "joshua1", "matthew1", "anthony",
    "maverick", "ginger1", "chocolate", "butterfly", "flower", "flowers",
    "cookie", "secret1", "whatever", "whatever1", "nothing", "blink182",
    "hello", "hello123", "hellokitty", "helloworld", "friends", "family",
    "forever", "purple", "orange", "yellow", "silver", "golden", "diamond",
    "samsung", "apple", "google", "facebook", "twitter", "linkedin", "yahoo",
    "hotmail", "internet", "pokemon", "naruto", "starwars1", "mercedes",
    "ferrari", "porsche", "corvette", "jaguar", "qwertyu", "qwer1234", "asdf",
    "asdf1234", "asdfasdf", "asdfghjkl", "zxcv", "zxcvb", "1qazxsw2", "qweasd",
    "qweasdzxc", "qwe123", "q1w2e3r4", "q1w2e3r4t5", "1qaz2wsx3edc",
    "!@#$%^&*", "!@#$%^", "abcdef", "abcdefg", "abcdefgh", "aaaaaaaa",
    "zzzzzz", "test", "test123", "testing", "demo", "user", "user123",
    "default", "system", "oracle", "mysql", "server", "private", "public",
    "temp", "temp123", "pass123", "pass1234", "passpass", "letmein123",
    "trustme", "access14", "money", "money1", "cash", "123456789q", "iamgod",
))
