"""Classes: constructors, properties, inheritance, class/static methods, dunders."""
from __future__ import annotations


class Person:
    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def greet(self) -> str:
        return f"Hello, I'm {self.name} and I'm {self.age} years old"

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self.age})"


class BankAccount:
    interest_rate = 0.02

    def __init__(self, account_number: str, initial_balance: float):
        self.account_number = account_number
        self._balance = initial_balance
        self.__pin = "0000"

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> None:
        self._balance += amount
        print(f"Deposited £{amount}. New balance: £{self._balance}")

    def withdraw(self, amount: float) -> bool:
        if amount > self._balance:
            print("Insufficient funds")
            return False
        self._balance -= amount
        print(f"Withdrew £{amount}. Remaining balance: £{self._balance}")
        return True

    @classmethod
    def open_with_bonus(cls, account_number: str) -> "BankAccount":
        return cls(account_number, 50)

    @staticmethod
    def is_valid_number(account_number: str) -> bool:
        return account_number.isdigit() and len(account_number) == 8


class SavingsAccount(BankAccount):
    interest_rate = 0.05

    def add_interest(self) -> None:
        interest = round(self._balance * self.interest_rate, 2)
        self.deposit(interest)


class Temperature:
    def __init__(self, celsius: float):
        self.celsius = celsius

    @property
    def fahrenheit(self) -> float:
        return self.celsius * 9 / 5 + 32

    @fahrenheit.setter
    def fahrenheit(self, value: float) -> None:
        self.celsius = (value - 32) * 5 / 9


class Vector:
    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vector) and (self.x, self.y) == (other.x, other.y)

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y})"


class Animal:
    def __init__(self, name: str):
        self.name = name

    def speak(self) -> str:
        return "..."


class Dog(Animal):
    def speak(self) -> str:
        return f"{self.name} says Woof!"


class Puppy(Dog):
    def speak(self) -> str:
        return super().speak() + " (tiny)"


def main() -> None:
    print("=== Basic class ===")
    alice = Person("Alice", 30)
    print(alice.greet())
    print(repr(alice))

    print("\n=== Encapsulation ===")
    account = BankAccount("12345678", 100)
    account.deposit(50)
    account.withdraw(500)
    account.withdraw(30)
    print(f"Balance property: £{account.balance}")
    print(f"Name-mangled attribute: {hasattr(account, '__pin')}, {hasattr(account, '_BankAccount__pin')}")

    print("\n=== Class & static methods ===")
    bonus = BankAccount.open_with_bonus("87654321")
    print(f"Bonus account balance: £{bonus.balance}")
    print(f"Valid number '12345678': {BankAccount.is_valid_number('12345678')}")
    print(f"Valid number 'abc': {BankAccount.is_valid_number('abc')}")

    print("\n=== Inheritance ===")
    savings = SavingsAccount("11112222", 1000)
    savings.add_interest()
    print(f"isinstance(savings, BankAccount): {isinstance(savings, BankAccount)}")
    print(f"MRO: {[c.__name__ for c in SavingsAccount.__mro__]}")

    print("\n=== Properties with setters ===")
    t = Temperature(25)
    print(f"{t.celsius}°C = {t.fahrenheit}°F")
    t.fahrenheit = 212
    print(f"After setting 212°F: {t.celsius}°C")

    print("\n=== Operator overloading ===")
    v = Vector(1, 2) + Vector(3, 4)
    print(f"Vector(1, 2) + Vector(3, 4) = {v}")
    print(f"Equal to Vector(4, 6): {v == Vector(4, 6)}")

    print("\n=== Polymorphism ===")
    for a in (Animal("Generic"), Dog("Rex"), Puppy("Bit")):
        print(a.speak())


if __name__ == "__main__":
    main()
