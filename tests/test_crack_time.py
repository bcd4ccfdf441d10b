from passcraft.crack_time import crack_time, estimate

def test_common_password_is_fast():
    est = estimate("password")
    assert est.display == "less than a second" or est.display.endswith(("second", "seconds", "minute", "minutes"))
    assert str(est) == est.display

def test_random_password_takes_centuries():
    assert crack_time("X7f!9Lq@2Vb#tR4sYp8K") == "centuries"

def test_more_guesses_more_time():
    weak = estimate("abc123")
    strong = estimate("vK8#pQ2!zR7m")
    assert strong.guesses > weak.guesses
    assert strong.seconds > weak.seconds
    assert strong.entropy_bits > weak.entropy_bits

def test_patterns_reduce_guesses():
    # a repeated block costs far less than two independent blocks
    once = estimate("xQ7#vL")
    twice = estimate("xQ7#vLxQ7#vL")
    assert twice.entropy_bits < 2 * once.entropy_bits

def test_empty_password():
    est = estimate("")
    assert est.display == "less than a second"
    assert est.entropy_bits == 0.0

def test_very_long_password():
    pw = "X7f!9Lq@2Vb#tR4sYp8KmW3$hJ6^cN1&gT5*eD0(kPuA8)zS2_rF7+yH4=bQ9?xV5<nG1>wE3;jL6:oI0~"
    assert len(pw) > 72
    assert crack_time(pw) == crack_time(pw[:72]) == "centuries"
