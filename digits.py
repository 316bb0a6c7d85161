from tutorialbase import ErrorType, TutorialError

DIGIT_NAMES = {
    0: "Zero", 1: "One", 2: "Two", 3: "Three", 4: "Four",
    5: "Five", 6: "Six", 7: "Seven", 8: "Eight", 9: "Nine",
}

NUMBERS = [16, 58, 510]


# spells out each decimal digit, most significant first; number % 10 is always
# a key of DIGIT_NAMES once negatives are ruled out
def digit_string(number):
    if number < 0:
        raise TutorialError(ErrorType.VALUE_ERROR, f"{number} has no digit name")
    output = ""
    while True:
        output = DIGIT_NAMES[number % 10] + output
        number //= 10
        if number <= 0:
            break
    return output


def digit_strings(numbers):
    return list(map(digit_string, numbers))
