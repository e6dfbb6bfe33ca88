# OOP Fundamentals: content only (no examples or quiz yet)

topic = {
    "name": "OOP Fundamentals",
    "slug": "oop-fundamentals",
    "description": "Master Object-Oriented Programming concepts",
    "estimated_time": 200,
    "order_index": 1,
}

lessons = [
    {
        "title": "Classes and Objects in C#",
        "slug": "classes-objects-csharp",
        "summary": "Learn the fundamental building blocks of object-oriented programming",
        "estimated_time": 30,
        "key_points": [
            "A class is a blueprint, an object is an instance of that blueprint",
            "Use private fields with public properties for encapsulation",
            "Constructors initialize object state",
            "Each object maintains its own data",
        ],
        "content": """# Classes and Objects in C#

## What are Classes?

A **class** is a blueprint that defines the structure and behavior of objects. It
encapsulates data (fields) and operations (methods) that can be performed on that data.

## What are Objects?

An **object** is an instance of a class, with its own set of data.

```csharp
public class Person
{
    private string name;
    private int age;

    public Person(string name, int age)
    {
        this.name = name;
        this.age = age;
    }

    public void Introduce()
    {
        Console.WriteLine($"Hi, I'm {name} and I'm {age} years old.");
    }
}
```

## Best Practices

1. **Encapsulate data**: use private fields with public properties
2. **Single Responsibility**: each class should have one clear purpose
3. **Initialize properly**: use constructors so objects start in a valid state
""",
    },
    {
        "title": "Inheritance & Polymorphism",
        "slug": "inheritance-polymorphism",
        "summary": "Extend classes through inheritance, override methods, and know when to prefer composition",
        "estimated_time": 45,
        "key_points": [
            "Inheritance models an 'is-a' relationship between a parent and a child class",
            "A subclass calls the parent constructor before touching its own state",
            "Method overriding lets a subclass replace or extend a parent method",
            "Polymorphism means one interface with many implementations",
            "Prefer composition over inheritance to avoid tight coupling",
        ],
        "content": """# Inheritance & Polymorphism

## What is Inheritance?

**Inheritance** lets a new class (the **subclass**) derive fields and methods from an
existing class (the **superclass**). It models an **"is-a"** relationship: a Circle IS-A Shape.

```csharp
public abstract class Shape
{
    public abstract double Area();

    public string Describe() => $"{GetType().Name} with area {Area():F2}";
}

public class Circle : Shape
{
    private readonly double radius;

    public Circle(double radius) => this.radius = radius;

    public override double Area() => Math.PI * radius * radius;
}
```

## Polymorphism

Code written against `Shape` works with every subclass:

```csharp
var shapes = new List<Shape> { new Circle(1), new Circle(2) };
foreach (var shape in shapes)
{
    Console.WriteLine(shape.Describe());
}
```

## Composition over Inheritance

Deep hierarchies couple classes tightly. When a class only needs a behaviour, hold
an object that provides it instead of inheriting from one.
""",
    },
]
